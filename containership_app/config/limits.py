"""
Loading rule constants for containers and ships.

Fill ratios are fractions of a container's max payload. Masses are in kg,
ship weights in tonnes.
"""

from __future__ import annotations

# Non-hazardous liquid cargo may fill up to 90% of max payload
LIQUID_FILL_RATIO = 0.9

# Hazardous liquid cargo may fill only half of max payload
HAZARDOUS_LIQUID_FILL_RATIO = 0.5

# Fraction of gas left behind when a gas container is emptied
GAS_RESIDUE_RATIO = 0.05

KG_PER_TONNE = 1000.0

# Utilisation (count or weight) at which a load plan gets a marginal warning
MARGINAL_UTILISATION = 0.9

# Serial number prefix: KON-<kind>-<n>
SERIAL_PREFIX = "KON"
