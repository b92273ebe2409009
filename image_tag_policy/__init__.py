"""Match image tags against glob and semver patterns and rank them newest first."""
