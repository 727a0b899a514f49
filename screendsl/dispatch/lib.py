"""Component Dispatcher: maps DSL sections to renderer entries.

The registry is an enum of known component kinds plus an immutable table of
`RendererHandle` entries keyed by lower-case identifier. Canonical ids and
their aliases all live in the same table, so a lookup is a single dict read.
Adding a component type means adding one `ComponentKind` member and one
`_HANDLES` entry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator

from screendsl.core.log import get_logger
from screendsl.resolver import lookup, resolve_string
from screendsl.section import Section

logger = get_logger(__name__)


class ComponentCategory(str, Enum):
    """High-level renderer groupings."""

    CHROME = "chrome"
    NAVIGATION = "navigation"
    MEDIA = "media"
    CONTENT = "content"
    COMMERCE = "commerce"
    ACCOUNT = "account"


class ComponentKind(str, Enum):
    """Known DSL component kinds.

    ``UNRECOGNIZED`` stands in for any identifier without a renderer.
    """

    # Chrome
    HEADER = "header"
    HEADER_MOBILE = "header_mobile"
    HEADER_2 = "header_2"

    # Navigation
    SEARCH_BAR = "search_bar"
    SIDE_NAVIGATION = "side_navigation"
    BOTTOM_NAVIGATION = "bottom_navigation"
    BOTTOM_NAVIGATION_STYLE_1 = "bottom_navigation_style_1"
    BOTTOM_NAVIGATION_STYLE_2 = "bottom_navigation_style_2"

    # Media
    COLLECTION_IMAGE = "collection_image"
    MEDIA_GRID = "media_grid"
    BANNER_SLIDER = "banner_slider"
    HERO_BANNER = "hero_banner"

    # Content
    COUNTDOWN = "countdown"
    SOCIAL_MEDIA_ICONS = "social_media_icons"
    TEXT_BLOCK = "text_block"
    TRENDING_SEARCHES = "trending_searches"
    FAQ_NEW = "faq_new"

    # Commerce
    PRODUCT_GRID = "product_grid"
    TRENDING_COLLECTIONS = "trending_collections"
    TAB_PRODUCT_GRID = "tab_product_grid"
    TAB_PRODUCT_CAROUSEL = "tab_product_carousel"
    PRODUCT_LIBRARY = "product_library"
    PRODUCT_INFO = "product_info"
    PRODUCT_DESCRIPTION = "product_description"
    PRODUCT_CAROUSEL = "product_carousel"
    ADD_TO_CART = "add_to_cart"
    CART_LINE_ITEMS = "cart_line_items"
    CHECKOUT_BUTTON = "checkout_button"

    # Account
    ACCOUNT_PROFILE = "account_profile"
    ACCOUNT_MENU = "account_menu"
    SIGN_UP = "sign_up"

    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class RendererHandle:
    """Registry entry describing the renderer for a component kind.

    Attributes:
        kind: Canonical component kind.
        renderer: Name of the renderer the host draws the section with.
            Several kinds may share one renderer.
        category: Renderer grouping.
        description: What the section shows.
        aliases: Extra identifiers (already normalised) that map here.
    """

    kind: ComponentKind
    renderer: str
    category: ComponentCategory
    description: str
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert the handle to a plain dictionary."""
        return {
            "kind": self.kind.value,
            "renderer": self.renderer,
            "category": self.category.value,
            "description": self.description,
            "aliases": list(self.aliases),
        }


# Header family that has a mobile variant, and where its hints live
MOBILE_VARIANT_FAMILY = ComponentKind.HEADER.value
MOBILE_VARIANT = ComponentKind.HEADER_MOBILE.value
MOBILE_HINT_KEYS = ("title", "label", "name", "variant")

_SEPARATORS = re.compile(r"[\s-]+")


_HANDLES: tuple[RendererHandle, ...] = (
    # === CHROME ===
    RendererHandle(
        kind=ComponentKind.HEADER,
        renderer="Header",
        category=ComponentCategory.CHROME,
        description="Top app header with logo, menu and cart actions",
    ),
    RendererHandle(
        kind=ComponentKind.HEADER_MOBILE,
        renderer="Header",
        category=ComponentCategory.CHROME,
        description="Top app header variant authored for mobile",
    ),
    RendererHandle(
        kind=ComponentKind.HEADER_2,
        renderer="Header2",
        category=ComponentCategory.CHROME,
        description="Secondary header strip shown under the main header",
    ),
    # === NAVIGATION ===
    RendererHandle(
        kind=ComponentKind.SEARCH_BAR,
        renderer="SearchBar",
        category=ComponentCategory.NAVIGATION,
        description="Product search input",
    ),
    RendererHandle(
        kind=ComponentKind.SIDE_NAVIGATION,
        renderer="SideNavigation",
        category=ComponentCategory.NAVIGATION,
        description="Slide-out side menu",
    ),
    RendererHandle(
        kind=ComponentKind.BOTTOM_NAVIGATION,
        renderer="BottomNavigation",
        category=ComponentCategory.NAVIGATION,
        description="Bottom tab bar",
    ),
    RendererHandle(
        kind=ComponentKind.BOTTOM_NAVIGATION_STYLE_1,
        renderer="BottomNavigation",
        category=ComponentCategory.NAVIGATION,
        description="Bottom tab bar, style 1",
    ),
    RendererHandle(
        kind=ComponentKind.BOTTOM_NAVIGATION_STYLE_2,
        renderer="BottomNavigation",
        category=ComponentCategory.NAVIGATION,
        description="Bottom tab bar, style 2",
    ),
    # === MEDIA ===
    RendererHandle(
        kind=ComponentKind.COLLECTION_IMAGE,
        renderer="CollectionImage",
        category=ComponentCategory.MEDIA,
        description="Collection tiles with images",
    ),
    RendererHandle(
        kind=ComponentKind.MEDIA_GRID,
        renderer="MediaGrid",
        category=ComponentCategory.MEDIA,
        description="Grid of images or videos",
    ),
    RendererHandle(
        kind=ComponentKind.BANNER_SLIDER,
        renderer="BannerSlider",
        category=ComponentCategory.MEDIA,
        description="Auto-advancing banner carousel",
    ),
    RendererHandle(
        kind=ComponentKind.HERO_BANNER,
        renderer="HeroBanner",
        category=ComponentCategory.MEDIA,
        description="Full-width hero image with headline and button",
        aliases=("herobanner",),
    ),
    # === CONTENT ===
    RendererHandle(
        kind=ComponentKind.COUNTDOWN,
        renderer="Countdown",
        category=ComponentCategory.CONTENT,
        description="Sale countdown timer",
    ),
    RendererHandle(
        kind=ComponentKind.SOCIAL_MEDIA_ICONS,
        renderer="SocialMediaIcons",
        category=ComponentCategory.CONTENT,
        description="Row of social network links",
    ),
    RendererHandle(
        kind=ComponentKind.TEXT_BLOCK,
        renderer="TextBlock",
        category=ComponentCategory.CONTENT,
        description="Styled rich text",
    ),
    RendererHandle(
        kind=ComponentKind.TRENDING_SEARCHES,
        renderer="TrendingSearches",
        category=ComponentCategory.CONTENT,
        description="Popular search terms",
    ),
    RendererHandle(
        kind=ComponentKind.FAQ_NEW,
        renderer="FaqNew",
        category=ComponentCategory.CONTENT,
        description="Expandable FAQ list",
    ),
    # === COMMERCE ===
    RendererHandle(
        kind=ComponentKind.PRODUCT_GRID,
        renderer="ProductGrid",
        category=ComponentCategory.COMMERCE,
        description="Grid of product cards",
    ),
    RendererHandle(
        kind=ComponentKind.TRENDING_COLLECTIONS,
        renderer="TrendingCollections",
        category=ComponentCategory.COMMERCE,
        description="Horizontally scrolling collection cards",
    ),
    RendererHandle(
        kind=ComponentKind.TAB_PRODUCT_GRID,
        renderer="TabProductGrid",
        category=ComponentCategory.COMMERCE,
        description="Tabbed product grid",
    ),
    RendererHandle(
        kind=ComponentKind.TAB_PRODUCT_CAROUSEL,
        renderer="TabProductGrid",
        category=ComponentCategory.COMMERCE,
        description="Tabbed product carousel",
    ),
    RendererHandle(
        kind=ComponentKind.PRODUCT_LIBRARY,
        renderer="ProductLibrary",
        category=ComponentCategory.COMMERCE,
        description="Filterable product listing",
    ),
    RendererHandle(
        kind=ComponentKind.PRODUCT_INFO,
        renderer="ProductInfo",
        category=ComponentCategory.COMMERCE,
        description="Product title, price and variants",
    ),
    RendererHandle(
        kind=ComponentKind.PRODUCT_DESCRIPTION,
        renderer="ProductDescription",
        category=ComponentCategory.COMMERCE,
        description="Product description body",
    ),
    RendererHandle(
        kind=ComponentKind.PRODUCT_CAROUSEL,
        renderer="ProductCarousel",
        category=ComponentCategory.COMMERCE,
        description="Horizontally scrolling product cards",
    ),
    RendererHandle(
        kind=ComponentKind.ADD_TO_CART,
        renderer="AddToCart",
        category=ComponentCategory.COMMERCE,
        description="Quantity picker and add-to-cart button",
    ),
    RendererHandle(
        kind=ComponentKind.CART_LINE_ITEMS,
        renderer="CartLineItems",
        category=ComponentCategory.COMMERCE,
        description="Items currently in the cart",
    ),
    RendererHandle(
        kind=ComponentKind.CHECKOUT_BUTTON,
        renderer="CheckoutButton",
        category=ComponentCategory.COMMERCE,
        description="Checkout call to action",
    ),
    # === ACCOUNT ===
    RendererHandle(
        kind=ComponentKind.ACCOUNT_PROFILE,
        renderer="AccountProfile",
        category=ComponentCategory.ACCOUNT,
        description="Signed-in customer summary",
    ),
    RendererHandle(
        kind=ComponentKind.ACCOUNT_MENU,
        renderer="AccountMenu",
        category=ComponentCategory.ACCOUNT,
        description="Account settings menu",
    ),
    RendererHandle(
        kind=ComponentKind.SIGN_UP,
        renderer="SignUp",
        category=ComponentCategory.ACCOUNT,
        description="Customer registration form",
        aliases=("signup",),
    ),
)


def _build_registry(handles: tuple[RendererHandle, ...]) -> MappingProxyType:
    table: dict[str, RendererHandle] = {}
    for handle in handles:
        for name in (handle.kind.value, *handle.aliases):
            key = normalize_component_name(name)
            if key in table:
                raise ValueError(f"Duplicate renderer identifier: {key}")
            table[key] = handle
    return MappingProxyType(table)


def normalize_component_name(value: Any) -> str:
    """Normalise an identifier: trim, lower-case, spaces/hyphens to ``_``.

    Example:
        >>> normalize_component_name("  Hero-Banner ")
        'hero_banner'
    """
    text = resolve_string(value, "")
    return _SEPARATORS.sub("_", text.strip().lower())


RENDERER_REGISTRY: MappingProxyType = _build_registry(_HANDLES)
_HANDLES_BY_KIND = MappingProxyType({handle.kind: handle for handle in _HANDLES})


# =============================================================================
# Lookup
# =============================================================================


def _mobile_hints(section: Section) -> Iterator[Any]:
    yield section.title
    yield (section.model_extra or {}).get("variant")
    for key in MOBILE_HINT_KEYS:
        yield lookup(section.props, key)


def _infer_device_variant(name: str, section: Section) -> str:
    if name != MOBILE_VARIANT_FAMILY:
        return name
    for hint in _mobile_hints(section):
        text = resolve_string(hint, "").lower()
        if "mobile" in text:
            return MOBILE_VARIANT
    return name


def component_identifier(section: Any) -> str:
    """Resolve the final registry key for a section.

    Applies normalisation and device-variant inference, but not aliases.
    Non-sections resolve to an empty identifier.
    """
    if not isinstance(section, Section):
        try:
            section = Section.from_dsl(section)
        except TypeError:
            return ""
    name = normalize_component_name(section.component_id)
    return _infer_device_variant(name, section)


def resolve_renderer(section: Any) -> RendererHandle | None:
    """Find the renderer for a section.

    Args:
        section: Section or raw DSL mapping.

    Returns:
        RendererHandle, or None when no renderer is registered. A missing
        renderer is logged once at WARNING level and never raised.
    """
    identifier = component_identifier(section)
    handle = RENDERER_REGISTRY.get(identifier)
    if handle is None:
        logger.warning(f"No renderer for component {identifier!r}; skipping section")
    return handle


def classify(section: Any) -> ComponentKind:
    """Classify a section, returning ``UNRECOGNIZED`` for unknown ids."""
    handle = RENDERER_REGISTRY.get(component_identifier(section))
    return handle.kind if handle else ComponentKind.UNRECOGNIZED


def get_handle(kind: ComponentKind) -> RendererHandle:
    """Get the handle for a component kind.

    Raises:
        KeyError: If ``kind`` has no renderer (``UNRECOGNIZED``).
    """
    try:
        return _HANDLES_BY_KIND[kind]
    except KeyError:
        available = ", ".join(k.value for k in _HANDLES_BY_KIND)
        raise KeyError(f"No renderer for {kind!r}. Available: {available}") from None


def list_components(category: ComponentCategory | None = None) -> list[ComponentKind]:
    """List registered component kinds, optionally filtered by category."""
    return [
        handle.kind
        for handle in _HANDLES
        if category is None or handle.category == category
    ]


__all__ = [
    "ComponentCategory",
    "ComponentKind",
    "RendererHandle",
    "RENDERER_REGISTRY",
    "MOBILE_HINT_KEYS",
    "normalize_component_name",
    "component_identifier",
    "resolve_renderer",
    "classify",
    "get_handle",
    "list_components",
]
