INDEX_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>{{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
  <style>
    .card { border: 1px solid rgba(255,255,255,.08); cursor: pointer; }
    .card.nav-focused { outline: 2px solid var(--bs-warning); }
    .game-index-title.nav-focused { color: var(--bs-warning); }
    .card.game-selected { filter: brightness(1.4); }
    .box-art { width: 100%; height: 220px; object-fit: cover; border-radius: .5rem .5rem 0 0; background:#222; }
    .title { white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
    .platform { color: rgba(255,255,255,.6); }
    .game-list { overflow-x: auto; flex-wrap: nowrap; }
    .game-list .col { flex: 0 0 180px; }
  </style>
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3 main-header">
  <a class="navbar-brand" href="{{ url_for('gamebrowser.index') }}">{{ app_title }}</a>
  <div class="ms-auto d-flex gap-2">
    {% for c in categories %}
      <a class="btn btn-outline-light btn-sm" href="#cat-{{ loop.index0 }}">{{ c.icon or '#' }}</a>
    {% endfor %}
    <form action="{{ url_for('gamebrowser.reload') }}" method="post">
      <button class="btn btn-outline-info btn-sm" type="submit">Reload</button>
    </form>
  </div>
</nav>

<div class="container-fluid py-4">
  {% with messages = get_flashed_messages() %}
    {% if messages %}
      <div class="alert alert-warning">{{ messages|join('. ') }}</div>
    {% endif %}
  {% endwith %}
  <div id="status" class="alert d-none"></div>

  {% if not entries %}
    <div class="text-center py-5">
      <h4>No games in <code>{{ catalog_file }}</code>.</h4>
    </div>
  {% else %}
    {% for c in categories %}
      <section class="game-index-row mb-4" id="cat-{{ loop.index0 }}">
        <h4 class="game-index-title">{{ c.icon or '#' }}</h4>
        <div class="row g-3 game-list">
          {% for g in entries if g.category == c.name %}
            <div class="col">
              <div class="card h-100 shadow-sm game-item" data-launch-id="{{ g.launch_id }}">
                <img class="box-art" src="{{ url_for('gamebrowser.box_art', launch_id=g.launch_id) }}" alt="box art" loading="lazy">
                <div class="card-body">
                  <div class="title fw-semibold" title="{{ g.title }}">{{ g.title }}</div>
                  <div class="small platform">{{ g.platform }}</div>
                </div>
              </div>
            </div>
          {% endfor %}
        </div>
      </section>
    {% endfor %}
  {% endif %}
</div>

<script>
  const statusBox = document.getElementById('status');
  function show(ok, text) {
    statusBox.className = 'alert ' + (ok ? 'alert-success' : 'alert-danger');
    statusBox.textContent = text;
  }
  function launchGame(card) {
    card.classList.add('game-selected');
    setTimeout(() => card.classList.remove('game-selected'), 300);
    fetch('{{ url_for("gamebrowser.index") }}launch/' + card.dataset.launchId, {method: 'POST'})
      .then(r => r.json())
      .then(d => show(d.ok, d.ok ? 'Launched ' + d.title : 'Launch failed: ' + d.error))
      .catch(e => show(false, 'Launch failed: ' + e));
  }

  // Couch navigation: up/down between category rows, left/right inside a row.
  // gameIndex -1 means the category title has focus, not a game.
  const nav = {
    rows: Array.from(document.querySelectorAll('.game-index-row')),
    rowIndex: 0,
    gameIndex: -1,
    games() {
      const row = this.rows[this.rowIndex];
      return row ? Array.from(row.querySelectorAll('.game-item')) : [];
    },
    render() {
      document.querySelectorAll('.nav-focused').forEach(el => el.classList.remove('nav-focused'));
      const row = this.rows[this.rowIndex];
      if (!row) return;
      const target = this.gameIndex < 0 ? row.querySelector('.game-index-title') : this.games()[this.gameIndex];
      if (!target) return;
      target.classList.add('nav-focused');
      target.scrollIntoView({block: 'center', inline: 'center', behavior: 'smooth'});
    },
    moveRow(step) {
      const next = this.rowIndex + step;
      if (next < 0 || next >= this.rows.length) return;
      this.rowIndex = next;
      if (this.gameIndex >= 0) this.gameIndex = Math.min(this.gameIndex, this.games().length - 1);
      this.render();
    },
    moveGame(step) {
      const games = this.games();
      if (!games.length) return;
      this.gameIndex = Math.max(0, Math.min(this.gameIndex + step, games.length - 1));
      this.render();
    },
    select() {
      if (this.gameIndex < 0) {
        this.gameIndex = 0;
        this.render();
      } else {
        const card = this.games()[this.gameIndex];
        if (card) launchGame(card);
      }
    },
    back() {
      this.gameIndex = -1;
      this.render();
    },
  };

  document.addEventListener('keydown', e => {
    const actions = {
      ArrowUp: () => nav.moveRow(-1),
      ArrowDown: () => nav.moveRow(1),
      ArrowLeft: () => nav.moveGame(-1),
      ArrowRight: () => nav.moveGame(1),
      Enter: () => nav.select(),
      Escape: () => nav.back(),
    };
    if (actions[e.key]) {
      e.preventDefault();
      actions[e.key]();
    }
  });

  document.querySelectorAll('.game-item').forEach(card => {
    card.addEventListener('click', () => {
      nav.rowIndex = nav.rows.indexOf(card.closest('.game-index-row'));
      nav.gameIndex = nav.games().indexOf(card);
      nav.render();
      launchGame(card);
    });
  });

  // Gamepad: D-pad (12-15) or left stick to move, A/X to select, B/Y to go back.
  const REPEAT_MS = 150;
  let lastInput = 0;
  let buttonsHeld = false;
  function pollGamepad(ts) {
    const pad = Array.from(navigator.getGamepads ? navigator.getGamepads() : []).find(p => p);
    if (pad) {
      const pressed = i => pad.buttons[i] && pad.buttons[i].pressed;
      const x = pad.axes[0] || 0, y = pad.axes[1] || 0;
      const selectDown = pressed(0) || pressed(2);
      const backDown = pressed(1) || pressed(3);
      if ((selectDown || backDown) && !buttonsHeld) {
        selectDown ? nav.select() : nav.back();
      }
      buttonsHeld = selectDown || backDown;
      if (ts - lastInput > REPEAT_MS) {
        let moved = true;
        if (pressed(12) || y < -0.5) nav.moveRow(-1);
        else if (pressed(13) || y > 0.5) nav.moveRow(1);
        else if (pressed(14) || x < -0.5) nav.moveGame(-1);
        else if (pressed(15) || x > 0.5) nav.moveGame(1);
        else moved = false;
        if (moved) lastInput = ts;
      }
    }
    requestAnimationFrame(pollGamepad);
  }
  window.addEventListener('gamepadconnected', () => requestAnimationFrame(pollGamepad), {once: true});

  nav.render();
</script>
</body>
</html>
"""
