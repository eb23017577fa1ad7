"""Qt view layer: main window and presenters."""
