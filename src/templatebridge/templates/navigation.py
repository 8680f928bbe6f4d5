"""Navigation templates - map surface with actions, map buttons and a pane."""

from typing import ClassVar

from .template import Template


class NavigationBaseTemplate(Template):
    """Base for templates drawn over the navigation map surface."""

    TYPE: ClassVar[str] = "navigation-base"
    EVENT_MAP: ClassVar[dict[str, str]] = {
        "didShowPanningInterface": "onDidShowPanningInterface",
        "didDismissPanningInterface": "onDidDismissPanningInterface",
        "didUpdatePanGestureWithTranslation": "onDidUpdatePanGestureWithTranslation",
        "didUpdatePinchGesture": "onDidUpdatePinchGesture",
        "didPress": "onDidPress",
        "didCancelNavigation": "onDidCancelNavigation",
        "didEnableAutoDrive": "onAutoDriveEnabled",
        "didSelectListItem": "onItemSelect",
        "backButtonPressed": "onBackButtonPressed",
        "didDismissNavigationAlert": "onDidDismissAlert",
        "willShowNavigationAlert": "onWillShowAlert",
    }


class NavigationTemplate(NavigationBaseTemplate):
    """Turn-by-turn navigation screen."""

    TYPE: ClassVar[str] = "navigation"


class MapTemplate(NavigationBaseTemplate):
    """Map screen with a pane of actions."""

    TYPE: ClassVar[str] = "map"
