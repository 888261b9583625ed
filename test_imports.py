#!/usr/bin/env python3
"""Check that the package and its rendering dependencies import."""
import sys
print("Python started", flush=True)

print("Importing PIL...", flush=True)
import PIL
print(f"Pillow imported: {PIL.__version__}", flush=True)

print("Importing matplotlib font manager...", flush=True)
from matplotlib import font_manager
print(f"Fonts registered: {len(font_manager.fontManager.ttflist)}", flush=True)

print("Importing signature_to_image...", flush=True)
import signature_to_image
print(f"signature_to_image imported: {signature_to_image.__version__}", flush=True)

print("All imports successful!", flush=True)
