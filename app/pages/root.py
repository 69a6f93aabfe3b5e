"""Root landing page for the record search service."""

from html import escape


def render_root_page(app_name: str, app_version: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    version = escape(app_version)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            background: #0b0b0b;
            color: #ddd;
            padding: 3rem 1rem;
        }}
        .wrap {{ max-width: 560px; margin: 0 auto; }}
        h1 {{ color: #fff; font-weight: 600; margin: 0 0 0.25rem 0; }}
        .tagline {{ color: #888; margin: 0 0 2rem 0; }}
        .card {{
            background: #111;
            border: 1px solid #222;
            padding: 1.25rem 1.5rem;
            margin-bottom: 1rem;
        }}
        code {{ font-family: ui-monospace, monospace; color: #cfcfcf; }}
        a {{ color: #9ecbff; }}
        .foot {{ color: #555; font-size: 0.8125rem; margin-top: 2rem; }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{name}</h1>
        <p class="tagline">Search deceased records and investigation reports.</p>

        <section class="card">
            <p>Search with <code>GET /api/v1/search?q=&lt;text&gt;</code>.
            Optional <code>scope</code>: <code>all</code>, <code>deceased</code>
            or <code>reports</code>. Optional <code>field</code>: <code>any</code>,
            <code>name</code>, <code>location</code> or <code>date</code>
            (<code>q</code> as YYYY-MM-DD, matched against date of death).</p>
            <p>Requests without a bearer token see only records released for
            public viewing. Approved mortuary staff, police and administrators
            see everything.</p>
        </section>

        <section class="card">
            <p><a href="/docs">API docs (Swagger)</a> · <a href="/redoc">ReDoc</a>
            · <a href="/api/v1/health">Health</a></p>
        </section>

        <footer class="foot">{name} {version}</footer>
    </div>
</body>
</html>
""".strip()
