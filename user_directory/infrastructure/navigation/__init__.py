from .route_navigator import RouteNavigator

__all__ = ["RouteNavigator"]
