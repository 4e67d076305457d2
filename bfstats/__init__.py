"""bfstats: turn BigFix deployment reports into Confluence wiki tables."""

PROGRAM_NAME = "bfstats"
VERSION = "1.0"
