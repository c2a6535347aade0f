"""
empty_dir_cleanup
=================

Delete junk files such as thumbs.db and .DS_Store, then collapse the
directories left empty, bottom-up.
"""

__all__ = [
	"cleaner",
	"collapser",
	"config",
	"console",
	"errors",
	"purger",
	"scanner",
]
