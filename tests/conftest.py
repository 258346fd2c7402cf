"""Shared pytest setup: render figures off-screen."""

import matplotlib

matplotlib.use("Agg")
