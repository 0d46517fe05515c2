"""form-layout: drag-and-drop layout decisions for single-column form canvases."""

__version__ = "0.3.0"
