"""Click commands for the pnpm-overrides CLI."""
