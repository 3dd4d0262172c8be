# Core package: configuration, logging, errors and shared HTTP helpers
