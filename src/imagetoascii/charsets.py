# Brightness ramp, darkest to brightest. One symbol per 16 levels of brightness.
RAMP = " .:;=+*!?^&#$%@█"

BUCKET_SIZE = 256 // len(RAMP)
