import os

# Language used by the command line when none is given
DEFAULT_LANGUAGE = os.getenv("MINISTEM_LANGUAGE", "english").strip().lower()

# Number of memoized stems kept by each stemmer class, 0 disables the cache
CACHE_SIZE = int(os.getenv("MINISTEM_CACHE_SIZE", "1024"))
