"""Feature packages for cwdswitch."""
