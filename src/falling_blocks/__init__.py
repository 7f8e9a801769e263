"""Falling-block puzzle rules engine with a Gymnasium front end."""
