import numpy as np
from sklearn.cluster import KMeans

from ..color import RGB


def _as_pixel_array(pixels):
    return np.asarray(pixels, dtype=np.int64).reshape(-1, 3)


def _average_color(bucket):
    # Round half up like the rest of the color math
    avg = np.floor(bucket.mean(axis=0) + 0.5).astype(int)
    return RGB(int(avg[0]), int(avg[1]), int(avg[2]))


def median_cut(pixels, target_count=16):
    """Reduce pixels to at most ``target_count`` colors with median cut.

    The most populous bucket is split at its median along the channel with
    the widest value range until the target is reached or no bucket can be
    split. Ties between equally sized buckets go to the earliest one.

    Args:
        pixels: Sequence of (r, g, b) tuples or an (N, 3) array
        target_count: Maximum number of colors to return

    Returns:
        list of RGB, one average color per bucket
    """
    data = _as_pixel_array(pixels)
    if len(data) == 0 or target_count < 1:
        return []

    buckets = [data]
    while len(buckets) < target_count:
        index = max(range(len(buckets)), key=lambda i: len(buckets[i]))
        bucket = buckets[index]
        if len(bucket) < 2:
            break

        channel = int(np.argmax(np.ptp(bucket, axis=0)))
        ordered = bucket[np.argsort(bucket[:, channel], kind="stable")]
        mid = len(ordered) // 2

        buckets[index] = ordered[:mid]
        buckets.append(ordered[mid:])

    return [_average_color(bucket) for bucket in buckets]


def kmeans_quantize(pixels, target_count=16):
    """Reduce pixels to at most ``target_count`` colors using k-means clustering."""
    data = _as_pixel_array(pixels)
    if len(data) == 0 or target_count < 1:
        return []

    n_clusters = min(target_count, len(np.unique(data, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(data)

    colors = []
    for center in kmeans.cluster_centers_:
        r, g, b = (int(np.clip(np.floor(c + 0.5), 0, 255)) for c in center)
        colors.append(RGB(r, g, b))

    return colors


QUANTIZERS = {
    "median-cut": median_cut,
    "kmeans": kmeans_quantize,
}
