from .normalize import dataset_from_xy

__all__ = ["dataset_from_xy"]
