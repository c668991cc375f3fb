import logging
from typing import Optional

logger = logging.getLogger(__name__)


def atoms_required_to_balance(charge: int, opposing_charge: int) -> Optional[int]:
    """
    Calculate how many atoms of ``charge`` cancel ``opposing_charge``.

    Returns the smallest positive ``n`` such that ``n * charge + opposing_charge == 0``,
    or None when no such integer exists.
    Args:
        charge: Per-atom charge of the element being counted.
        opposing_charge: Total charge already contributed by the other side.
    Returns:
        Optional[int]: Atom count, or None if the charges cannot be balanced.
    """
    charge_abs = abs(charge)
    opposing_abs = abs(opposing_charge)
    if charge == 0:
        # A neutral atom only balances a neutral opposing side
        if opposing_charge == 0:
            return 1
        logger.debug("Cannot balance neutral charge against %d", opposing_charge)
        return None
    if opposing_charge == 0:
        logger.debug("Cannot balance charge %d against a neutral side", charge)
        return None
    if max(charge_abs, opposing_abs) % min(charge_abs, opposing_abs) != 0:
        logger.debug("Charges %d and %d are not divisible", charge, opposing_charge)
        return None
    if opposing_charge % charge != 0 or -opposing_charge // charge < 1:
        logger.debug("No positive atom count balances %d against %d", charge, opposing_charge)
        return None
    atoms = -opposing_charge // charge
    logger.debug("Balanced %d against %d with %d atoms", charge, opposing_charge, atoms)
    return atoms
