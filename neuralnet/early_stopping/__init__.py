from .EarlyStopping import EarlyStopping

__all__ = ["EarlyStopping"]
