"""Rule tables that turn intensity and warmth into short texts.

Every function here is a deterministic lookup; nothing is random and
nothing depends on state.
"""

from color_diary_api.schemas.color import PaletteEntry, Warmth

WARMTH_PHRASES = {
    Warmth.WARM: "warm and energetic",
    Warmth.COOL: "cool and calm",
    Warmth.NEUTRAL: "balanced",
}

OPPOSITE_FAMILIES = {
    Warmth.WARM: "cool colors like blue, purple",
    Warmth.COOL: "warm colors like red, yellow",
    Warmth.NEUTRAL: "vibrant",
}

MIXTURE_WARMTH_FRAMING = {
    Warmth.WARM: "Warm colors show that you feel social and outgoing.",
    Warmth.COOL: "Cool colors indicate an introspective and thoughtful period.",
    Warmth.NEUTRAL: "Neutral colors reflect a balanced and steady approach.",
}

MIXTURE_WARMTH_ADVICE = {
    Warmth.WARM: "Focusing on social activities might be good for you.",
    Warmth.COOL: "Introspective activities and meditation can be beneficial.",
}


def intensity_label(intensity: int) -> str:
    """Qualitative energy bucket of an intensity score."""
    if intensity >= 8:
        return "very high"
    if intensity >= 6:
        return "high"
    if intensity >= 4:
        return "moderate"
    return "low"


def warmth_phrase(warmth: Warmth | str) -> str:
    return WARMTH_PHRASES[Warmth(warmth)]


def opposite_family(warmth: Warmth | str) -> str:
    return OPPOSITE_FAMILIES[Warmth(warmth)]


def color_analysis_text(entry: PaletteEntry) -> str:
    return (
        f"This {entry.mood}-themed color shows a {intensity_label(entry.intensity)} energy level "
        f"and evokes a {warmth_phrase(entry.warmth)} feeling."
    )


def color_suggestions(entry: PaletteEntry) -> list[str]:
    """Rebalancing nudge (when needed) followed by a variety suggestion."""
    warmth = Warmth(entry.warmth)
    suggestions = []

    if warmth is Warmth.WARM and entry.intensity > 7:
        suggestions.append("You are choosing very warm colors. Try a cool color for balance.")
    elif warmth is Warmth.COOL and entry.intensity < 4:
        suggestions.append("You are choosing low-energy colors. A more vibrant color might boost your mood.")

    suggestions.append(
        f"If you want to try a different emotion from the {entry.mood} theme, "
        f"you can prefer {opposite_family(warmth)} colors."
    )
    return suggestions


def mixture_interpretation(intensity: int, warmth: Warmth | str) -> str:
    if intensity >= 7:
        energy = "You are in a high-energy period."
    elif intensity >= 5:
        energy = "You appear to be in a balanced mood period."
    else:
        energy = "You may be in a calm and peaceful period."
    return f"{energy} {MIXTURE_WARMTH_FRAMING[Warmth(warmth)]}"


def mixture_recommendations(intensity: int, warmth: Warmth | str) -> list[str]:
    recommendations = []

    if intensity > 7:
        recommendations.append("Try calm activities to balance your high energy level.")
    elif intensity < 4:
        recommendations.append("You can do active hobbies or sports to increase your energy level.")

    advice = MIXTURE_WARMTH_ADVICE.get(Warmth(warmth))
    if advice:
        recommendations.append(advice)
    return recommendations
