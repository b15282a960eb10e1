"""
Request handlers for the dispenser actions.
"""
from .dispenser_handler import MintDispenserHandler

__all__ = ['MintDispenserHandler']
