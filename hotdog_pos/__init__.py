"""Point-of-sale simulator for Mainit na Aso's hotdog stall."""
