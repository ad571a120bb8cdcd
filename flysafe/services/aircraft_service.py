"""
Aircraft service - wing/tail area, MAC and recommended CG for RC planes
"""
from flysafe.models import CGRange, PlaneCalculation, PlaneDimensions, PlaneWithCalculations

MEASURING_HINT = "Measure from the wing leading edge at the root, next to the fuselage."

# Recommended CG as a fraction of MAC
CG_FORWARD_FRACTION = 0.25  # safe start
CG_AFT_FRACTION = 0.33      # aggressive


def calculate_plane_data(dimensions: PlaneDimensions) -> PlaneCalculation:
    """
    Calculate aerodynamic data for a tapered wing

    All measurements must use the same unit (e.g. cm). Areas come out in
    that unit squared.
    """
    root = dimensions.root_chord
    tip = dimensions.tip_chord

    # Trapezoid area
    wing_area = ((root + tip) / 2) * dimensions.wing_span

    # A single tail chord means a rectangular tail
    tail_tip = dimensions.tail_tip_chord or dimensions.tail_root_chord
    tail_area = ((dimensions.tail_root_chord + tail_tip) / 2) * dimensions.tail_span

    mac = (2 / 3) * ((root ** 2 + root * tip + tip ** 2) / (root + tip))

    # Where the MAC starts, measured from the root leading edge
    mac_le = (root - mac) / 6 + dimensions.sweep * 0.5

    cg_forward = mac_le + mac * CG_FORWARD_FRACTION
    cg_aft = mac_le + mac * CG_AFT_FRACTION

    return PlaneCalculation(
        wing_area=round(wing_area),
        tail_area=round(tail_area),
        mac=round(mac, 1),
        mac_leading_edge=round(mac_le, 2),
        recommended_cg=CGRange(
            forward=round(cg_forward, 1),
            aft=round(cg_aft, 1)
        ),
        hint=MEASURING_HINT
    )


def with_calculations(dimensions: PlaneDimensions) -> PlaneWithCalculations:
    """Return the dimensions together with the calculated values"""
    calculated = calculate_plane_data(dimensions)

    return PlaneWithCalculations(
        **dimensions.model_dump(),
        wing_area=calculated.wing_area,
        tail_area=calculated.tail_area,
        mac=calculated.mac,
        cg_forward=calculated.recommended_cg.forward,
        cg_aft=calculated.recommended_cg.aft
    )
