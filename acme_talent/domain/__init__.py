from .models import Identity

__all__ = ["Identity"]
