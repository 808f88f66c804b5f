"""Small interactive command-line calculators and the arithmetic functions behind them."""

__version__ = "1.0.0"