"""FastAPI adapter over the notebook layout engine"""
