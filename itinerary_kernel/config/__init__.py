"""Runtime configuration helpers."""

from itinerary_kernel.config.settings import KernelSettings, resolve_kernel_settings

__all__ = ["KernelSettings", "resolve_kernel_settings"]
