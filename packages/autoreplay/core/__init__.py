"""Core generation pipeline for AutoReplay."""
