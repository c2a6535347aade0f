#!/usr/bin/env python3
"""
Terminal output helpers.
"""

# Standard Library
import sys

#============================================


def color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def tag(label: str, code: str) -> str:
	"""
	Bracketed, colored line prefix such as [INFO].
	"""
	return color(f"[{label}]", code)
