"""Application layer: message dispatch, configuration and wiring."""
