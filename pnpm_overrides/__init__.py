"""pnpm-overrides - test whether pnpm overrides are still needed."""

__version__ = "1.0.0"
