"""Application composition: settings, dispatchers and the screen controller."""
