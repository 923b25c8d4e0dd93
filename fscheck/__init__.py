"""fscheck - filesystem block and inode usage check for Nagios-style supervisors."""

__version__ = "1.0.0"
