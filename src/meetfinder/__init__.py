"""Meeting Finder - browse and filter a directory of scheduled meetings."""
