"""Pseudo-random string generation."""
from .random_string import RandomStringGenerator, RandomStringGeneratorProtocol

__all__ = [
    'RandomStringGenerator',
    'RandomStringGeneratorProtocol',
]
