"""HTML landing page rendering for release identification.

The page is produced by plain string interpolation over a fixed template.
Runtime values are HTML-escaped before insertion.
"""

from __future__ import annotations

from html import escape
from string import Template
from typing import Final

from bluegreen.domain import ReleaseProfile, RuntimeSnapshot

_BASE_STYLES: Final[Template] = Template(
    """
    body {
      font-family: Arial, sans-serif;
      margin: 0;
      padding: 0;
      display: flex;
      justify-content: center;
      align-items: center;
      min-height: 100vh;
      background: linear-gradient(135deg, $gradient_start 0%, $gradient_end 100%);
    }
    .container {
      text-align: center;
      background: white;
      padding: 60px 80px;
      border-radius: 20px;
      box-shadow: 0 20px 60px rgba(0,0,0,0.3);
      max-width: 600px;
    }
    h1 {
      color: $gradient_start;
      font-size: 2.5em;
      margin-bottom: 20px;
    }
    .version {
      color: $gradient_end;
      font-size: 3em;
      font-weight: bold;
      margin: 20px 0;
    }
    .environment {
      background: $gradient_start;
      color: white;
      padding: 15px 30px;
      border-radius: 50px;
      display: inline-block;
      font-size: 1.2em;
      margin: 20px 0;
    }
    .info {
      color: #666;
      margin-top: 30px;
      line-height: 1.8;
    }
    .badge {
      display: inline-block;
      background: $badge_color;
      color: white;
      padding: 5px 15px;
      border-radius: 20px;
      font-size: 0.9em;
      margin: 10px 5px;
    }"""
)

_FEATURE_STYLES: Final[Template] = Template(
    """
    .features {
      text-align: left;
      margin: 20px auto;
      max-width: 400px;
      background: #f5f5f5;
      padding: 20px;
      border-radius: 10px;
    }
    .features h3 {
      color: $gradient_start;
      margin-top: 0;
    }
    .features ul {
      margin: 10px 0;
      padding-left: 20px;
    }
    .features li {
      margin: 8px 0;
    }"""
)

_DOCUMENT: Final[Template] = Template(
    """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>$page_title</title>
  <style>$styles
  </style>
</head>
<body>
  <div class="container">
    <h1>🚀 Welcome to the Blue-Green Deployment Demo</h1>
    <div class="version">Version $version</div>
    <div class="environment">$environment_icon $environment_label</div>
    <div class="info">
      <p><strong>Status:</strong> <span class="badge">$status_label</span></p>
      <p>$summary</p>
$highlights
      <p><strong>Server Time:</strong> $timestamp</p>
      <p><strong>Hostname:</strong> $hostname</p>
    </div>
  </div>
</body>
</html>
"""
)


def _render_highlights(release_profile: ReleaseProfile) -> str:
    if not release_profile.highlights:
        return ""
    items = "\n".join(f"          <li>{escape(item)}</li>" for item in release_profile.highlights)
    return (
        '      <div class="features">\n'
        f"        <h3>✨ What's New in v{escape(release_profile.version)}:</h3>\n"
        "        <ul>\n"
        f"{items}\n"
        "        </ul>\n"
        "      </div>"
    )


def api_render_landing_page(release_profile: ReleaseProfile, runtime_snapshot: RuntimeSnapshot) -> str:
    """Render the landing page HTML document for one release.

    Args:
        release_profile: Release identity and styling.
        runtime_snapshot: Runtime values shown on the page.

    Returns:
        str: Complete HTML document.
    """

    theme = release_profile.theme
    styles = _BASE_STYLES.substitute(
        gradient_start=theme.gradient_start,
        gradient_end=theme.gradient_end,
        badge_color=theme.badge_color,
    )
    if release_profile.highlights:
        styles += _FEATURE_STYLES.substitute(gradient_start=theme.gradient_start)

    return _DOCUMENT.substitute(
        page_title=escape(release_profile.page_title),
        styles=styles,
        version=escape(release_profile.version),
        environment_icon=theme.environment_icon,
        environment_label=escape(release_profile.environment_label),
        status_label=escape(release_profile.status_label),
        summary=escape(release_profile.summary),
        highlights=_render_highlights(release_profile),
        timestamp=escape(runtime_snapshot.timestamp),
        hostname=escape(runtime_snapshot.hostname),
    )
