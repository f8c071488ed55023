"""
main.py — Bubble Sort Visualizer Flask App
===========================================
The web server that hosts the player.

Routes:
  GET  /             – main UI
  POST /api/play     – start a fresh run, or resume a paused one
  POST /api/pause    – pause the current run
  POST /api/stop     – stop and return to the idle placeholder
  GET  /api/state    – advance due steps and return the player (polling)

State management:
  One Player per app (app.extensions["player"]) holds the driver, its
  scheduler and the container it renders into.  The driver is not
  thread-safe and the Flask server may run requests on several threads,
  so every route takes the player's lock.

Timing:
  Steps are not pushed by a background thread.  The page polls
  /api/state and each poll fires the steps that became due since the last
  one (the scheduler catches up in order).  Pausing the browser tab
  therefore pauses the animation's wall clock, not its logic.
"""

import logging
import threading
import time
from dataclasses import asdict
from typing import Any, Callable, Dict, Optional

from flask import Blueprint, Flask, current_app, jsonify, render_template_string, request

from engine import BubbleSortDriver, Scheduler, Settings, DEFAULT_SETTINGS
from scene import PlayerContainer
from sorting import PSEUDOCODE, generate_list
from ui import (
    analytics_panel,
    button_states,
    player_classes,
    playback_controls,
    pseudocode_viewer,
    render_player,
    settings_panel,
)

logger = logging.getLogger(__name__)

# JSON keys /api/play accepts
PLAY_KEYS = (
    "listLength",
    "stepIntervalMs",
    "animationSpeed",
    "maxBarHeight",
    "barWidth",
    "barSpacing",
    "textOffset",
    "speed",
)


# ---------------------------------------------------------------------------
# Player — everything one page needs, behind one lock
# ---------------------------------------------------------------------------
class Player:
    def __init__(
        self,
        settings: Settings = DEFAULT_SETTINGS,
        clock: Callable[[], float] = time.monotonic,
        list_generator: Callable = generate_list,
    ):
        self.lock      = threading.Lock()
        self.scheduler = Scheduler(clock)
        self.container = PlayerContainer(max_bar_height=settings.max_bar_height)
        self.driver    = BubbleSortDriver(
            self.container,
            self.scheduler,
            settings=settings,
            list_generator=list_generator,
        )
        self._completed_generation = -1
        self.driver.on_sort_completed(self._on_sort_completed)

    def _on_sort_completed(self) -> None:
        self._completed_generation = self.driver.generation

    @property
    def sort_completed(self) -> bool:
        # a new run or a stop bumps the generation; a rejected play does not
        return self._completed_generation == self.driver.generation

    def play(self, overrides: Dict[str, Any]) -> None:
        self.driver.play(overrides)

    def snapshot(self) -> Dict[str, Any]:
        """Everything the page re-renders after a call or a poll."""
        driver  = self.driver
        metrics = driver.metrics()
        data    = asdict(metrics)
        data["progress"] = metrics.progress

        return {
            "status":     driver.status.value,
            "completed":  self.sort_completed,
            "generation": driver.generation,
            "html":       render_player(self.container),
            "classes":    player_classes(self.container),
            "scroll_x":   self.container.scroll_x,
            "height":     self.container.height,
            "buttons":    button_states(driver.status),
            "metrics":    data,
            "analytics":  analytics_panel(metrics),
            "pseudocode": pseudocode_viewer(PSEUDOCODE, driver.current_line),
        }


def get_player() -> Player:
    return current_app.extensions["player"]


def play_overrides(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Pick the recognised settings out of a /api/play body."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return {k: data[k] for k in PLAY_KEYS if data.get(k) not in (None, "")}


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
bp = Blueprint("player", __name__)


@bp.route("/")
def index():
    player = get_player()
    with player.lock:
        driver = player.driver
        html = render_template_string(
            INDEX_TEMPLATE,
            player_html=render_player(player.container),
            player_classes=player_classes(player.container),
            player_height=player.container.height,
            playback=playback_controls(driver.status),
            settings=settings_panel(driver.settings),
            analytics=analytics_panel(driver.metrics()),
            pseudocode=pseudocode_viewer(PSEUDOCODE, driver.current_line),
        )
    return html


@bp.route("/api/play", methods=["POST"])
def api_play():
    player = get_player()
    try:
        overrides = play_overrides(request.get_json(silent=True))
        with player.lock:
            player.play(overrides)
            return jsonify(player.snapshot())
    except ValueError as e:
        logger.warning("Rejected play request: %s", e)
        return jsonify({"error": str(e)}), 400


@bp.route("/api/pause", methods=["POST"])
def api_pause():
    player = get_player()
    with player.lock:
        player.driver.pause()
        return jsonify(player.snapshot())


@bp.route("/api/stop", methods=["POST"])
def api_stop():
    player = get_player()
    with player.lock:
        player.driver.stop()
        return jsonify(player.snapshot())


@bp.route("/api/state")
def api_state():
    player = get_player()
    width = request.args.get("width", type=float)
    with player.lock:
        player.scheduler.run_due()
        if width:
            player.container.resize(width)
        return jsonify(player.snapshot())


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(
    settings: Optional[Settings] = None,
    clock: Callable[[], float] = time.monotonic,
    list_generator: Callable = generate_list,
) -> Flask:
    app = Flask(__name__)
    app.extensions["player"] = Player(settings or DEFAULT_SETTINGS, clock, list_generator)
    app.register_blueprint(bp)
    return app


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Bubble Sort Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; min-width: 0; }

    /* Player: bars are centred until they no longer fit, then scroll */
    #player-wrapper {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      overflow-x: hidden;
      padding: 24px;
      border-bottom: 1px solid var(--border);
    }
    #player-wrapper.scroll-x { overflow-x: auto; justify-content: flex-start; }

    /* swaps slide, state changes fade; fills come from the SVG */
    .bar { transition: transform 0.25s ease; }
    .bar rect { transition: fill 0.2s ease; }

    #bottom-panel { padding: 20px; background: var(--bg-dark); }

    .panel, #pseudocode-container {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3, #pseudocode-container h3 {
      font-size: 13px;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      color: var(--accent-cyan);
    }

    .code-line {
      font-family: 'JetBrains Mono', monospace;
      font-size: 13px;
      padding: 2px 12px;
      white-space: pre;
    }
    .code-line.highlight {
      background: rgba(6, 182, 212, 0.15);
      border-left: 3px solid var(--accent-cyan);
    }

    .button-row { display: flex; gap: 8px; }
    button {
      background: var(--accent-cyan);
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary, .finished-badge { background: var(--accent-emerald); }

    label { display: block; margin-top: 10px; font-size: 12px; color: var(--text-secondary); }
    select, input[type="number"] {
      width: 100%;
      padding: 8px;
      margin-top: 4px;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      color: var(--text-primary);
    }

    .step-info { margin-top: 12px; font-size: 13px; color: var(--text-secondary); }
    .finished-badge { color: #fff; padding: 2px 8px; border-radius: 6px; font-size: 11px; }

    /* analytics table + settings hint */
    td { padding: 4px; font-size: 13px; }
    .hint { font-size: 11px; color: var(--text-secondary); margin-top: 8px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="playback">{{ playback|safe }}</div>
    <div id="settings">{{ settings|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <div id="main">
    <div id="player-wrapper" class="{{ player_classes }}" style="min-height: {{ player_height }}px;">
      {{ player_html|safe }}
    </div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    const POLL_MS = 50;
    const wrapper = document.getElementById('player-wrapper');
    let lastHtml = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return await res.json();
    }

    function apply(data) {
      if (data.error) {
        alert(data.error);
        return;
      }
      if (data.html !== lastHtml) {
        wrapper.innerHTML = data.html;
        lastHtml = data.html;
      }
      wrapper.className = data.classes;
      document.getElementById('play-button').disabled = !data.buttons.play;
      document.getElementById('pause-button').disabled = !data.buttons.pause;
      document.getElementById('stop-button').disabled = !data.buttons.stop;
      document.getElementById('player-status').textContent = data.status;
      document.getElementById('analytics').innerHTML = data.analytics;
      document.getElementById('pseudocode').innerHTML = data.pseudocode;
    }

    async function poll() {
      const res = await fetch('/api/state?width=' + wrapper.clientWidth);
      apply(await res.json());
    }

    document.getElementById('play-button').addEventListener('click', async () => {
      const preset = document.getElementById('speed-selector').value;
      const body = {
        listLength: parseInt(document.getElementById('list-length').value),
        animationSpeed: parseInt(document.getElementById('animation-speed').value),
      };
      if (preset) body.speed = preset;
      apply(await post('/api/play', body));
    });

    document.getElementById('pause-button').addEventListener('click', async () => {
      apply(await post('/api/pause', {}));
    });

    document.getElementById('stop-button').addEventListener('click', async () => {
      apply(await post('/api/stop', {}));
    });

    setInterval(poll, POLL_MS);
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Bubble Sort Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
