from .renderer import image_to_bw_pixels, to_pil_image

__all__ = ["image_to_bw_pixels", "to_pil_image"]
