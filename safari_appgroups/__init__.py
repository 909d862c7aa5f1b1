from safari_appgroups.config import PostConvertConfig

__all__ = ["PostConvertConfig"]
