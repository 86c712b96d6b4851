"""Run every test headless: SDL dummy video/audio drivers before pygame starts."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
