# ABOUTME: Package marker for the weather lookup application.
# ABOUTME: Modules are imported directly (e.g. weather_lookup.app).
