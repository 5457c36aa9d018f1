"""Planet-hosting stars: a solitary star or a close binary acting as one."""

from .constraints import HostStar, HostStarConstraints

__all__ = [
    "HostStar",
    "HostStarConstraints",
]
