# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_GENERIC = 1  # Missing argument or unreadable coverage file
EXIT_DATAERR = 65  # Malformed report data (--strict only)
