from .renderer import MODES, image_to_pil, load_raster, pil_to_image, save_raster, scale_sample

__all__ = ["image_to_pil", "load_raster", "MODES", "pil_to_image", "save_raster", "scale_sample"]
