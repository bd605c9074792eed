# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Generic failure (fallback)
EXIT_DATAERR = 65  # Input data was invalid (e.g., malformed coverage JSON)
EXIT_NOINPUT = 66  # Input file not found (e.g., coverage.json missing)
EXIT_CANTCREAT = 73  # Output file or directory cannot be created
EXIT_CONFIG = 78  # Invalid configuration (e.g., unknown report kind)
