"""Contributor list rendering in Markdown, JSON and HTML."""

import html
import json
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from ..config import DisplayOptions
from ..models import Contributor, RenderRequest, FORMAT_HTML, FORMAT_JSON


AVATAR_PROXY_URL = "https://wsrv.nl/"
DETAILED_AVATAR_SIZE_MD = 20
AVATAR_SIZE = 32

# Characters left alone by JavaScript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def thank_you_line(count: int) -> str:
    return f"A big thank you to the {pluralize(count, 'contributor')} who made this release possible!"


def proxied_avatar_url(avatar_url: str) -> str:
    """Route an avatar through the image proxy as a 32px circle."""
    encoded = quote(avatar_url, safe=URI_COMPONENT_SAFE)
    return f"{AVATAR_PROXY_URL}?url={encoded}&w={AVATAR_SIZE}&h={AVATAR_SIZE}&fit=cover&mask=circle&mtrim"


def _attr(value: Optional[str]) -> str:
    """Escape a value for a double-quoted HTML attribute."""
    return html.escape(value or "", quote=False).replace('"', "&quot;")


def _text(value: Optional[str]) -> str:
    return html.escape(value or "", quote=False)


def _display_name(contributor: Contributor) -> str:
    return contributor.username or contributor.name


def _badge_title(contributor: Contributor) -> str:
    return f"{contributor.name} ({pluralize(contributor.commit_count, 'commit')})"


def _badge_open(contributor: Contributor) -> str:
    return (f'<a href="{_attr(contributor.profile_url or "#")}" '
            f'title="{_attr(_badge_title(contributor))}" target="_blank">')


def _markdown_line(contributor: Contributor, detailed: bool, display: DisplayOptions) -> str:
    if not detailed:
        line = _badge_open(contributor)
        if display.include_avatar and contributor.avatar_url:
            line += (f'<img src="{proxied_avatar_url(contributor.avatar_url)}" '
                     f'width="{AVATAR_SIZE}" height="{AVATAR_SIZE}" alt="{_attr(contributor.name)}" /> ')
        else:
            line += f"**{_display_name(contributor)}**"
        return line + "</a>"

    line = "- "
    if display.include_avatar and contributor.avatar_url:
        line += (f'<img src="{_attr(contributor.avatar_url)}" width="{DETAILED_AVATAR_SIZE_MD}" '
                 f'height="{DETAILED_AVATAR_SIZE_MD}" alt="{_attr(contributor.name)}" /> ')

    if contributor.username and contributor.profile_url:
        line += f"[@{contributor.username}]({contributor.profile_url})"
    else:
        line += f"**{contributor.name}**"

    line += f" ({pluralize(contributor.commit_count, 'commit')})"

    if display.include_email and contributor.email:
        line += f" - {contributor.email}"
    return line


def format_as_markdown(contributors: List[Contributor], release_label: str, detailed: bool,
                       display: DisplayOptions) -> str:
    lines = [
        f"## Contributors to {release_label}",
        "",
        thank_you_line(len(contributors)),
        "",
    ]
    lines.extend(_markdown_line(c, detailed, display) for c in contributors)
    lines.append("")
    return "\n".join(lines)


def _json_entry(contributor: Contributor, display: DisplayOptions) -> Dict[str, Any]:
    entry: Dict[str, Any] = {'name': contributor.name}
    if display.include_email:
        entry['email'] = contributor.email
    if contributor.username is not None:
        entry['username'] = contributor.username
    if contributor.profile_url is not None:
        entry['profileUrl'] = contributor.profile_url
    if display.include_avatar:
        if contributor.avatar_url:
            entry['avatarUrl'] = contributor.avatar_url
        elif contributor.username:
            entry['avatarUrl'] = f"{contributor.username}.png"
    entry['commitCount'] = contributor.commit_count
    return entry


def format_as_json(contributors: List[Contributor], release_label: str,
                   display: DisplayOptions) -> str:
    document = {
        'release': release_label,
        'contributorCount': len(contributors),
        'contributors': [_json_entry(c, display) for c in contributors],
    }
    return json.dumps(document, indent=2, ensure_ascii=False)


def _html_detailed_item(contributor: Contributor, display: DisplayOptions) -> List[str]:
    lines = ["    <li>"]
    if display.include_avatar and contributor.avatar_url:
        lines.append(f'      <img src="{_attr(contributor.avatar_url)}" width="{AVATAR_SIZE}" '
                     f'height="{AVATAR_SIZE}" alt="{_attr(contributor.name)}" class="avatar" />')

    if contributor.username and contributor.profile_url:
        lines.append(f'      <a href="{_attr(contributor.profile_url)}" '
                     f'target="_blank">@{_text(contributor.username)}</a>')
    else:
        lines.append(f"      <strong>{_text(_display_name(contributor))}</strong>")

    lines.append(f'      <span class="commit-count">{pluralize(contributor.commit_count, "commit")}</span>')
    lines.append("    </li>")
    return lines


def _html_badge(contributor: Contributor, display: DisplayOptions) -> str:
    line = "    " + _badge_open(contributor)
    if display.include_avatar and contributor.avatar_url:
        line += (f'<img src="{proxied_avatar_url(contributor.avatar_url)}" '
                 f'width="{AVATAR_SIZE}" height="{AVATAR_SIZE}" alt="{_attr(contributor.name)}" class="avatar" /> ')
    else:
        line += f"<strong>{_text(_display_name(contributor)[:1].upper())}</strong>"
    return line + "</a>"


def format_as_html(contributors: List[Contributor], release_label: str, detailed: bool,
                   display: DisplayOptions) -> str:
    container = "ul" if detailed else "div"
    lines = [
        '<div class="release-contributors">',
        f"  <h2>Contributors to {_text(release_label)}</h2>",
        f"  <p>{thank_you_line(len(contributors))}</p>",
        f'  <{container} class="contributors-list">',
    ]

    for contributor in contributors:
        if detailed:
            lines.extend(_html_detailed_item(contributor, display))
        else:
            lines.append(_html_badge(contributor, display))

    lines.append(f"  </{container}>")
    lines.append("</div>")
    return "\n".join(lines)


def render(request: RenderRequest, display: Optional[DisplayOptions] = None) -> str:
    """Render a contributor list.

    Pure: the same request and options always give the same string. Unknown
    formats fall back to Markdown.

    Args:
        request: Contributors, release label, format and detail flag
        display: Email/avatar switches; defaults to avatars on, emails off

    Returns:
        The rendered document
    """
    display = display or DisplayOptions()
    contributors = list(request.contributors)

    if request.format == FORMAT_JSON:
        return format_as_json(contributors, request.release_label, display)
    if request.format == FORMAT_HTML:
        return format_as_html(contributors, request.release_label, request.detailed, display)
    return format_as_markdown(contributors, request.release_label, request.detailed, display)
