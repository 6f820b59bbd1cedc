#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ubb2html/handlers/media.py
"""Image, iframe and video embed tag handlers.

Video tags accept either a bare id or a page URL of the provider::

    [youtube]dQw4w9WgXcQ[/youtube]
    [vimeo]https://vimeo.com/76979871[/vimeo]
    [video]https://youtu.be/dQw4w9WgXcQ[/video]

[video] picks the provider from its inner text. When no id can be extracted
the handlers render "Unknown video" instead of an empty embed.
"""

from __future__ import annotations

import html
import logging
import re
from typing import TYPE_CHECKING, Optional

from ubb2html.attributes import DEFAULT_ATTRIBUTE_KEY, Attributes, encode_attributes
from ubb2html.constants import (
    IFRAME_ALLOWED_KEYS,
    IMG_ALLOWED_KEYS,
    IMG_LEFT_STYLE,
    IMG_RIGHT_STYLE,
    UNKNOWN_VIDEO_MESSAGE,
    VIMEO_DEFAULT_SIZE,
    VIMEO_EMBED_URL,
    YOUTUBE_DEFAULT_SIZE,
    YOUTUBE_EMBED_URL,
    ZIDEO_DEFAULT_SIZE,
    ZIDEO_EMBED_URL,
    VideoProvider,
)
from ubb2html.handlers.links import normalize_link_target
from ubb2html.utils.html_sanitizer import sanitize_url

if TYPE_CHECKING:
    from ubb2html.context import RenderContext
    from ubb2html.registry import TagHandler

logger = logging.getLogger(__name__)

_YOUTUBE_BARE_ID = re.compile(r"[\w-]+")
_YOUTUBE_ID_PATTERNS = (
    re.compile(r"[?&]v=([\w-]+)"),
    re.compile(r"youtu\.be/([\w-]+)"),
    re.compile(r"/(?:embed|v|shorts)/([\w-]+)"),
)
_VIMEO_ID = re.compile(r"[0-9]{5,}")
_ZIDEO_BARE_ID = re.compile(r"\w+")
_ZIDEO_PAGE_ID = re.compile(r"playzideo/(\w+)")
_ELEVEN_CHARACTER_ID = re.compile(r"[^?&/\s]{11}")


def _merge_class(attributes: Attributes, tag: str, context: RenderContext) -> str:
    """Combine a ``class`` attribute given on the tag with the tag's CSS class."""
    classes = [attributes.get("class", "").strip(), context.options.css_class(tag)]
    return " ".join(css for css in classes if css)


def _render_image(
    inner_text: str, attributes: Attributes, context: RenderContext, tag: str, style: Optional[str]
) -> str:
    source = normalize_link_target(inner_text) or normalize_link_target(attributes.get(DEFAULT_ATTRIBUTE_KEY, ""))
    image = {
        "src": sanitize_url(context.convert_file_url(source)),
        "alt": attributes.get("alt", ""),
    }
    if style:
        image["style"] = style
    image["class"] = _merge_class(attributes, tag, context)
    for key in ("width", "height"):
        if attributes.get(key):
            image[key] = attributes[key]

    return f"<img {encode_attributes(image, allowed_keys=IMG_ALLOWED_KEYS)} />"


def render_img(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [img]url[/img]; ``alt``, ``width`` and ``height`` attributes are kept."""
    return _render_image(inner_text, attributes, context, "img", None)


def render_img_left(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return _render_image(inner_text, attributes, context, "img_left", IMG_LEFT_STYLE)


def render_img_right(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    return _render_image(inner_text, attributes, context, "img_right", IMG_RIGHT_STYLE)


def _render_frame(source: str, attributes: Attributes, context: RenderContext, tag: str) -> str:
    frame = dict(attributes)
    frame["src"] = sanitize_url(normalize_link_target(source))
    frame["class"] = _merge_class(attributes, tag, context)
    return f"<iframe {encode_attributes(frame, allowed_keys=IFRAME_ALLOWED_KEYS)}></iframe>"


def render_iframe(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [iframe]url[/iframe].

    Only ``width``, ``height``, ``frameborder``, ``marginwidth``,
    ``marginheight`` and ``class`` attributes are passed on.
    """
    return _render_frame(inner_text, attributes, context, "iframe")


def _render_embed(
    video_id: Optional[str],
    attributes: Attributes,
    context: RenderContext,
    provider: VideoProvider,
    embed_url: str,
    default_size: tuple[str, str],
) -> str:
    if not video_id:
        logger.debug(f"No {provider} video id found")
        return UNKNOWN_VIDEO_MESSAGE

    frame = dict(attributes)
    frame.setdefault("width", default_size[0])
    frame.setdefault("height", default_size[1])
    frame.setdefault("frameborder", "0")
    return _render_frame(embed_url.format(video_id=video_id), frame, context, provider)


def extract_youtube_id(text: str) -> Optional[str]:
    """Return the YouTube video id in a bare id or a watch/share/embed URL.

    Examples
    --------
        >>> extract_youtube_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42")
        'dQw4w9WgXcQ'
        >>> extract_youtube_id("https://example.com/") is None
        True

    """
    text = html.unescape(text).strip()
    if _YOUTUBE_BARE_ID.fullmatch(text):
        return text
    for pattern in _YOUTUBE_ID_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def extract_vimeo_id(text: str) -> Optional[str]:
    match = _VIMEO_ID.search(text)
    return match.group(0) if match else None


def extract_zideo_id(text: str) -> Optional[str]:
    text = html.unescape(text).strip()
    if _ZIDEO_BARE_ID.fullmatch(text):
        return text
    match = _ZIDEO_PAGE_ID.search(text)
    return match.group(1) if match else None


def render_youtube(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    video_id = extract_youtube_id(inner_text)
    return _render_embed(video_id, attributes, context, "youtube", YOUTUBE_EMBED_URL, YOUTUBE_DEFAULT_SIZE)


def render_vimeo(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    video_id = extract_vimeo_id(inner_text)
    return _render_embed(video_id, attributes, context, "vimeo", VIMEO_EMBED_URL, VIMEO_DEFAULT_SIZE)


def render_zideo(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    video_id = extract_zideo_id(inner_text)
    return _render_embed(video_id, attributes, context, "zideo", ZIDEO_EMBED_URL, ZIDEO_DEFAULT_SIZE)


def detect_video_provider(text: str) -> Optional[VideoProvider]:
    """Guess the video provider of a [video] tag from its inner text.

    Provider names in the text win over id shapes: a YouTube URL may well
    contain five digits in a row.

    Returns
    -------
    VideoProvider or None
        ``zideo``, ``vimeo`` or ``youtube``; None when nothing matches

    """
    text = html.unescape(text).strip()
    if "zideo.nl" in text:
        return "zideo"
    if "vimeo" in text:
        return "vimeo"
    if "youtu" in text:
        return "youtube"
    if _VIMEO_ID.search(text):
        return "vimeo"
    if _ELEVEN_CHARACTER_ID.fullmatch(text):
        return "youtube"
    return None


_VIDEO_RENDERERS = {
    "youtube": render_youtube,
    "vimeo": render_vimeo,
    "zideo": render_zideo,
}


def render_video(inner_text: str, attributes: Attributes, context: RenderContext) -> str:
    """Render [video] through the handler of the detected provider."""
    provider = detect_video_provider(inner_text)
    if provider is None:
        logger.debug(f"Unknown video source: {inner_text[:50]!r}")
        return UNKNOWN_VIDEO_MESSAGE
    return _VIDEO_RENDERERS[provider](inner_text, attributes, context)


MEDIA_HANDLERS: dict[str, TagHandler] = {
    "img": render_img,
    "img_left": render_img_left,
    "img_right": render_img_right,
    "iframe": render_iframe,
    "youtube": render_youtube,
    "vimeo": render_vimeo,
    "zideo": render_zideo,
    "video": render_video,
}
