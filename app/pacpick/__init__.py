"""pacpick - interactive package browser for Arch Linux.

Browse native and AUR packages in fzf and update, remove or
reinstall them without leaving the terminal.
"""

__version__ = "0.3.0"
