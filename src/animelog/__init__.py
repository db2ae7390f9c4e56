"""animelog - anime favorites and watch-later tracking backend."""
