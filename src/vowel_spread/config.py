VOWELS = "aeiou"


NUM_SLOTS = len(VOWELS)
