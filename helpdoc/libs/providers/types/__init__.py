from .vim_types import VIM_TYPE_MAP, VimTypeMap

__all__ = ["VimTypeMap", "VIM_TYPE_MAP"]
