"""Application constants."""

from app.core.enums import CyclePhase

# Strength estimator: formulas are only trusted for 1-30 reps
ONE_RM_MIN_REPS = 1
ONE_RM_MAX_REPS = 30

# Improvement trend needs at least two points per half
IMPROVEMENT_MIN_WORKOUTS = 4

# 28-day reference partition: last cycle day of each phase
REFERENCE_CYCLE_LENGTH = 28
REFERENCE_PHASE_ENDS: dict[CyclePhase, int] = {
    CyclePhase.MENSTRUAL: 7,
    CyclePhase.FOLLICULAR: 12,
    CyclePhase.OVULATION: 16,
    CyclePhase.EARLY_LUTEAL: 20,
    CyclePhase.LATE_LUTEAL: 28,
}

# Longest cycle accepted from settings or callers
MAX_CYCLE_LENGTH_DAYS = 90

# Fertile window opens this many days before the ovulation band (day 10 on 28 days)
FERTILE_DAYS_BEFORE_OVULATION = 3

PHASE_RECOMMENDATIONS: dict[CyclePhase, list[str]] = {
    CyclePhase.MENSTRUAL: [
        "Maintain activity while reducing intensity",
        "Work on technique and mobility",
        "Reduce volume and increase rest between attempts",
        "Focus on sub-maximal strength training (70-90%)",
        "Consider planning a recovery week",
    ],
    CyclePhase.FOLLICULAR: [
        "Optimal time for intense training",
        "Focus on maximum strength sessions",
        "Work on difficult projects and test limits",
        "Good for hard bouldering and power training",
        "Monitor your well-being and energy levels",
    ],
    CyclePhase.OVULATION: [
        "Maximize power while taking care of joints",
        "Reach peak level of intensity if feeling strong",
        "Long warm-up and caution with dynamic moves",
        "Higher injury risk - focus on training load and recovery",
        "Tackle difficult projects but don't force joints",
    ],
    CyclePhase.EARLY_LUTEAL: [
        "High intensity, low volume training",
        "Focus on dynamic movements",
        "Train intensely with fewer repetitions",
        "Adjust intensity based on how you feel",
        "Good time for strength endurance training",
    ],
    CyclePhase.LATE_LUTEAL: [
        "Maintain training consistency without pressure",
        "Good time for deload and calmer climbing",
        "Focus on technique, execution, and tactics",
        "Reduce strength load",
        "Use for repeats and refining details",
    ],
}
