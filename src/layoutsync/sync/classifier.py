"""Property classification for cross-platform sync.

A property either carries *content* (text, colors, styling, wiring) that must
look the same on desktop and mobile, or *layout* (size, position, spacing)
that each platform owns. Classification is a lookup over three immutable
tables, checked in order:

1. :data:`PLATFORM_SPECIFIC_PROPERTIES` - explicit deny list.
2. :data:`SYNC_PROPERTIES` - explicit allow list.
3. :data:`KEYWORD_PLATFORM_SPECIFIC_PROPERTIES` - known component properties
   whose name contains a size/position keyword.

Names found in no table fall back to the same keyword rule, so a property a
component introduces later is still classified deterministically. Anything
else syncs.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from functools import lru_cache
from typing import TypeVar

V = TypeVar("V")


class PropertyClass(StrEnum):
    SYNC = "sync"
    PLATFORM_SPECIFIC = "platform-specific"


PLATFORM_SPECIFIC_PROPERTIES: frozenset[str] = frozenset(
    {
        # size and positioning
        "width",
        "height",
        "top",
        "left",
        "minHeight",
        "maxHeight",
        "minWidth",
        "maxWidth",
        # typography sizing
        "fontSize",
        "lineHeight",
        # spacing
        "padding",
        "margin",
        # border and shadow magnitude
        "borderWidth",
        "borderRadius",
        "shadowBlur",
        "shadowSpread",
        "shadowX",
        "shadowY",
        # size-affecting transforms
        "scale",
        "perspective",
        # image and album crop geometry
        "cropWidth",
        "cropHeight",
        "cropX",
        "cropY",
        "cropZoom",
        "cropRotation",
        # grid and flex sizing
        "gridColumns",
        "gridRows",
        "gridGap",
        "columnGap",
        "rowGap",
        "flexBasis",
        "flexGrow",
        "flexShrink",
        # quick actions
        "buttonSize",
        "spacing",
        # pinning distances
        "topDistance",
        "bottomDistance",
        "leftDistance",
        "rightDistance",
        # modal placement
        "modalWidth",
        "modalHeight",
        "modalTop",
        "modalLeft",
        "modalPosition",
    }
)

SYNC_PROPERTIES: frozenset[str] = frozenset(
    {
        # content
        "text",
        "url",
        "src",
        "alt",
        "title",
        "placeholder",
        "value",
        "content",
        # color and background composition
        "color",
        "backgroundColor",
        "backgroundType",
        "backgroundImage",
        "backgroundVideo",
        "gradientType",
        "gradientAngle",
        "gradientColor1",
        "gradientColor2",
        "backgroundSize",
        "backgroundPosition",
        "backgroundRepeat",
        "backgroundAttachment",
        "background",
        # typography, excluding size
        "fontFamily",
        "fontWeight",
        "fontStyle",
        "textAlign",
        "textTransform",
        "textDecoration",
        "letterSpacing",
        "direction",
        "textShadow",
        "textStroke",
        # border and shadow style, excluding magnitude
        "borderStyle",
        "borderColor",
        "shadow",
        "shadowType",
        "shadowColor",
        # filters
        "opacity",
        "brightness",
        "contrast",
        "saturate",
        "grayscale",
        "invert",
        "sepia",
        "hueRotate",
        "blur",
        "blendMode",
        # transforms, excluding scale
        "rotate",
        "rotateX",
        "rotateY",
        "rotateZ",
        "skewX",
        "skewY",
        "transformOrigin",
        # layout keywords
        "flexDirection",
        "alignItems",
        "justifyContent",
        "alignContent",
        "alignSelf",
        "justifySelf",
        "order",
        "position",
        "zIndex",
        "overflow",
        "overflowX",
        "overflowY",
        "display",
        "visibility",
        "float",
        "clear",
        "fillSpace",
        # component state
        "enabled",
        "disabled",
        "checked",
        "selected",
        "required",
        "readonly",
        "multiple",
        "autoplay",
        "loop",
        "muted",
        "controls",
        "hidden",
        "locked",
        "isEditing",
        "isCropMode",
        # overlay
        "overlayType",
        "overlayBlendMode",
        "overlayOpacity",
        "overlayColor",
        "overlayGradientType",
        "overlayGradientAngle",
        "overlayGradientColor1",
        "overlayGradientColor2",
        "overlayImage",
        "overlayImageSize",
        "overlayImagePosition",
        "overlayImageRepeat",
        "overlayImageAttachment",
        # animation
        "displayAnimation",
        "hoverAnimation",
        "animationDuration",
        "animationRepeat",
        "animationDelay",
        "animationDirection",
        "animationFillMode",
        "animationPlayState",
        "animationTimingFunction",
        # forms
        "formType",
        "questions",
        "extraInfo",
        "submitUrl",
        "method",
        "defaultValue",
        # buttons and images
        "buttonStyle",
        "textComponent",
        "objectFit",
        "lockAspectRatio",
        # popup and dropbox
        "autoOpen",
        "autoOpenDelay",
        "dropboxPosition",
        "dropboxDistance",
        "dropboxTriggerElementId",
        # album
        "albumImages",
        "cropArea",
        "croppedImageUrl",
        # quick actions
        "triggerIcon",
        "triggerIconColor",
        "triggerBackground",
        "triggerBackgroundType",
        "triggerGradientType",
        "triggerGradientAngle",
        "triggerGradientColor1",
        "triggerGradientColor2",
        "triggerBorderColor",
        "triggerBorderStyle",
        "triggerBorderRadius",
        "triggerBorderWidth",
        "actionButtons",
        "expandDirection",
        "svgCode",
        "iconColor",
        # event wiring
        "events",
        "eventType",
        "actionType",
        "sectionId",
        "dropboxId",
        "lightboxMediaType",
        "lightboxImageUrl",
        "lightboxVideoUrl",
        "lightboxVideoType",
        "albumModalId",
        "phoneNumber",
        "email",
        "openInNewTab",
        "hideElementIds",
        "showElementIds",
        "copyElementId",
        "popupId",
        "pinning",
    }
)

SIZE_KEYWORDS: tuple[str, ...] = ("width", "height", "size", "top", "left", "right", "bottom", "margin", "padding")

# Settable props written by the editor's components that neither explicit
# table names. Their classification comes from the keyword rule.
KNOWN_COMPONENT_PROPERTIES: frozenset[str] = frozenset(
    {
        "apiUrl",
        "autoSwitchToCountUp",
        "backgroundOpacity",
        "backgroundVideoType",
        "carouselAutoPlay",
        "carouselItemsDesktop",
        "carouselItemsMobile",
        "carouselItemsTablet",
        "carouselShowArrows",
        "carouselShowDots",
        "carouselSpeed",
        "children",
        "countMode",
        "countType",
        "currentSetting",
        "customQuestions",
        "dataName",
        "elementPosition",
        "endTime",
        "formGap",
        "gradientColor",
        "gradientDeg",
        "gradientFrom",
        "gradientTo",
        "htmlContent",
        "iconHorizontalPosition",
        "iconSize",
        "imagePadding",
        "imagePaddingBottom",
        "imagePaddingLeft",
        "imagePaddingRight",
        "imagePaddingTop",
        "initField",
        "inputType",
        "isBeingManaged",
        "isChildOfButton",
        "isChildOfForm",
        "isChildOfGroup",
        "isGuestForm",
        "isWeddingWishForm",
        "lineWidth",
        "maxWishes",
        "minutes",
        "options",
        "originalDimensions",
        "overlayGradientColor",
        "pointerEvents",
        "reactImageCropData",
        "showDays",
        "showHours",
        "showIcon",
        "showMinutes",
        "showMockData",
        "showSeconds",
        "style",
        "submissionType",
        "textColor",
        "triggerGradientColor",
        "triggerOpenBackground",
        "triggerOpenBackgroundType",
        "triggerOpenGradientAngle",
        "triggerOpenGradientColor",
        "triggerOpenGradientType",
        "triggerOpenIcon",
        "triggerOpenIconColor",
        "useIndividualPadding",
        "useIndividualWrapperPadding",
        "wishContentFontColor",
        "wishContentFontFamily",
        "wishContentFontSize",
        "wishItemBackgroundColor",
        "wishItemBorderColor",
        "wishItemBorderRadius",
        "wishItemBorderWidth",
        "wishItemPadding",
        "wishNameFontColor",
        "wishNameFontFamily",
        "wishNameFontSize",
        "wrapperPadding",
        "wrapperPaddingBottom",
        "wrapperPaddingLeft",
        "wrapperPaddingRight",
        "wrapperPaddingTop",
    }
)


def _has_size_keyword(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in SIZE_KEYWORDS)


KEYWORD_PLATFORM_SPECIFIC_PROPERTIES: frozenset[str] = frozenset(
    name
    for name in KNOWN_COMPONENT_PROPERTIES - PLATFORM_SPECIFIC_PROPERTIES - SYNC_PROPERTIES
    if _has_size_keyword(name)
)


@lru_cache(maxsize=1024)
def _classify_unknown(name: str) -> PropertyClass:
    if _has_size_keyword(name):
        return PropertyClass.PLATFORM_SPECIFIC
    return PropertyClass.SYNC


def classify(name: str) -> PropertyClass:
    """Decide whether property *name* participates in cross-platform sync."""
    if name in PLATFORM_SPECIFIC_PROPERTIES:
        return PropertyClass.PLATFORM_SPECIFIC
    if name in SYNC_PROPERTIES:
        return PropertyClass.SYNC
    if name in KEYWORD_PLATFORM_SPECIFIC_PROPERTIES:
        return PropertyClass.PLATFORM_SPECIFIC
    if name in KNOWN_COMPONENT_PROPERTIES:
        return PropertyClass.SYNC
    return _classify_unknown(name)


def should_sync_property(name: str) -> bool:
    return classify(name) is PropertyClass.SYNC


def filter_syncable_props(props: Mapping[str, V]) -> dict[str, V]:
    """Return the syncable subset of *props*, keeping the original key order."""
    return {key: value for key, value in props.items() if should_sync_property(key)}


def classification_rule(name: str) -> str:
    """Name the rule that decides *name*: ``deny``, ``allow``, ``keyword`` or ``default``."""
    if name in PLATFORM_SPECIFIC_PROPERTIES:
        return "deny"
    if name in SYNC_PROPERTIES:
        return "allow"
    if classify(name) is PropertyClass.PLATFORM_SPECIFIC:
        return "keyword"
    return "default"
