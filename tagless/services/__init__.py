"""Service Layer — the imperative shell around core: settings, logging, JSON IO."""
