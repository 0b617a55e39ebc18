FILTER_HELP_TEXT = (
    "Only compare files matching this pattern:\n"
    "  report.txt : files named exactly 'report.txt' (any depth)\n"
    "  *.log      : files with the extension 'log' (case-sensitive)\n"
    "Default: all files"
)

WORKERS_HELP_TEXT = (
    "Number of threads used to hash files. Default: 1 (sequential)\n"
    "Example    : %(prog)s -r ~/Pictures -w 4"
)

EPILOG_TEXT = """
Examples:
  Basic usage - find duplicates in Downloads folder
  %(prog)s -r ~/Downloads

  Only compare files with the .jpg extension
  %(prog)s -r ~/Downloads -f "*.jpg"

  Only compare files named report.txt, hashing with 4 threads
  %(prog)s -r ~/Documents -f report.txt -w 4

  Save the report to a file, with progress and statistics on stderr
  %(prog)s -r ~/Downloads --verbose > ~/Downloads/report.txt
"""
