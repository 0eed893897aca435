"""Value types shared by the registry, the patcher and the session."""

from lantern.model.location import CurrentPosition, Location, RegionGroup

__all__ = ['CurrentPosition', 'Location', 'RegionGroup']
