"""SystemLogger - Leveled, privacy-aware, categorized logging facade."""

__version__ = "0.1.0"
