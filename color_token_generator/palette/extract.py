import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import create_color
from ..contrast import relative_luminance


def extract_colors(image_path, n_colors=8):
    """Extract dominant colors using k-means clustering"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = max(1, min(n_colors, len(filtered_pixels)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)

    return [
        create_color(int(round(r)), int(round(g)), int(round(b)))
        for r, g, b in kmeans.cluster_centers_
    ]


def find_average_color(image_path):
    """Get overall average color of image"""
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((100, 100))
    pixels = np.array(img).reshape(-1, 3)
    avg = pixels.mean(axis=0)
    return create_color(int(round(avg[0])), int(round(avg[1])), int(round(avg[2])))


def extract_seed_from_image(image_path, n_colors=8):
    """Pick a brand seed color from an image.

    Prefers the most saturated cluster whose luminance leaves room for both
    lighter and darker scale steps; falls back to the most saturated cluster.

    Returns:
        Canonical '#RRGGBB' hex string
    """
    colors = extract_colors(image_path, n_colors=n_colors)
    vibrant = [
        c for c in colors if c.hsl[1] > 0.35 and 0.1 < relative_luminance(c.rgb) < 0.75
    ]
    candidates = vibrant or colors
    return max(candidates, key=lambda c: c.hsl[1]).hex
