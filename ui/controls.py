"""
controls.py — UI Control Panels
================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls  – play / pause / stop
  • settings_panel     – list length + speed inputs
  • analytics_panel    – comparisons, swaps, passes, progress
  • pseudocode_viewer  – bubble sort with live line highlighting

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import Dict, List, Optional

from engine import DriverStatus, RunMetrics, Settings, SPEED_PRESETS


# ---------------------------------------------------------------------------
# Button enablement per driver status
# ---------------------------------------------------------------------------
def button_states(status: DriverStatus) -> Dict[str, bool]:
    """
    Which buttons are enabled.  A completed run only offers Stop; Play
    becomes available again once the player is back to idle.
    """
    return {
        "play":  status in (DriverStatus.IDLE, DriverStatus.PAUSED),
        "pause": status is DriverStatus.RUNNING,
        "stop":  status is not DriverStatus.IDLE,
    }


def _disabled(enabled: bool) -> str:
    return "" if enabled else "disabled"


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(status: DriverStatus = DriverStatus.IDLE) -> str:
    enabled = button_states(status)
    finished = status is DriverStatus.COMPLETED

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="play-button" class="btn-primary" title="Play" {_disabled(enabled["play"])}>▶ Play</button>
        <button id="pause-button" title="Pause" {_disabled(enabled["pause"])}>⏸ Pause</button>
        <button id="stop-button" class="btn-secondary" title="Stop" {_disabled(enabled["stop"])}>⏹ Stop</button>
      </div>
      <div class="step-info">
        Status: <span id="player-status">{status.value}</span>
        {' <span class="finished-badge">SORTED</span>' if finished else ''}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Settings Panel
# ---------------------------------------------------------------------------
def settings_panel(settings: Settings, speed: Optional[str] = None) -> str:
    options = []
    for name, ms in SPEED_PRESETS.items():
        sel = 'selected' if name == speed else ''
        options.append(f'<option value="{name}" {sel}>{name.capitalize()} ({ms} ms)</option>')

    return f"""
    <div class="panel settings-panel">
      <h3>⚙ Settings</h3>
      <label>List length:
        <input type="number" id="list-length" value="{int(settings.list_length)}" min="2" max="100">
      </label>
      <label>Animation speed (ms per step):
        <input type="number" id="animation-speed" value="{int(settings.step_interval_ms)}" min="10" max="5000" step="10">
      </label>
      <label>Preset:
        <select id="speed-selector">
          <option value="">Custom</option>
          {''.join(options)}
        </select>
      </label>
      <p class="hint">Changes apply the next time a fresh run starts.</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics or metrics.list_length == 0:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Press Play to see metrics.</p>
        </div>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics</h3>
      <table>
        <tr><td>Values:</td><td><strong>{metrics.list_length}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{metrics.comparisons} / {metrics.expected_comparisons}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Passes:</td><td><strong>{metrics.passes} / {metrics.total_passes}</strong></td></tr>
        <tr><td>Progress:</td><td><strong>{metrics.progress * 100:.0f}%</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        # Escape HTML entities
        line_escaped = line.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{line_escaped}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
