"""Rally game core: codriver notes, vehicle and engine state, effect geometry and HUD rules."""

__version__ = "0.6.7"