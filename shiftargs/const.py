VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


ARGV0 = "shiftargs"
DESCRIPTION = "A destructive command-line token parser"

# Treat `--key=value` as `--key value`
SPLIT_EQUALS = True
