import html
from typing import Any, Iterable
from urllib.parse import quote

# characters encodeURIComponent leaves alone, on top of quote's own
_URI_COMPONENT_SAFE = "!'()*~"

IMAGE_DIR = "/images/vehicles"


def url_component(value: Any) -> str:
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


def text(value: Any, escape: bool = False) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    out = str(value)
    return html.escape(out) if escape else out


def link_list(values: Iterable[Any], prefix: str, escape: bool = False) -> str:
    return "\n".join(
        f'<li><a href="{prefix}/{url_component(v)}">{text(v, escape)}</a></li>'
        for v in values
    )


def nav_bar(values: Iterable[Any], prefix: str, escape: bool = False) -> str:
    return " | ".join(
        f'<a href="{prefix}/{url_component(v)}">{text(v, escape)}</a>' for v in values
    )


def image_src(make: Any, model: Any) -> str:
    return f"{IMAGE_DIR}/{url_component(make)}_{url_component(model)}.jpg"


def js_number(value: float) -> int | float:
    # 150.0 -> 150
    return int(value) if float(value).is_integer() else value
