"""
evconf - interactive configuration wizard for EV charging setups

evconf walks an operator through a device template's parameters, validates
every answer against the template's constraints, and renders the collected
values as a ready-to-paste YAML configuration block.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
