"""An immutable cons list that counts its elements in constant stack space."""

version = '0.1.0'
