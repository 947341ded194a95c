"""tidycsv CLI commands."""
