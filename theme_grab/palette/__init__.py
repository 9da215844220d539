from .loader import load_colors_from_json
from .quantize import QUANTIZERS, kmeans_quantize, median_cut
from .reducer import WeightedColor, reduce_colors

__all__ = [
    "QUANTIZERS",
    "WeightedColor",
    "kmeans_quantize",
    "load_colors_from_json",
    "median_cut",
    "reduce_colors",
]
