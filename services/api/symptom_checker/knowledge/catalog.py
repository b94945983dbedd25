"""
Static knowledge tables: conditions and emergency red flags. English-only.
Tuples of immutable records; loaded once at import and shared by every request.
Keywords are lowercase and matched as plain substrings (no tokenization).
"""

from typing import NamedTuple


class ConditionEntry(NamedTuple):
    name: str
    keywords: tuple[str, ...]
    explanation: str
    advice: str


class RedFlagEntry(NamedTuple):
    keywords: tuple[str, ...]
    message: str


# Declaration order is the ranking tie-break.
CONDITIONS: tuple[ConditionEntry, ...] = (
    ConditionEntry(
        name="Common cold",
        keywords=("runny nose", "sore throat", "sneezing", "stuffy nose", "congestion"),
        explanation="Viral upper respiratory infection — usually mild, resolves in a few days.",
        advice="Rest, fluids, OTC symptom relief. See a doctor if symptoms worsen or persist >10 days.",
    ),
    ConditionEntry(
        name="Influenza (flu)",
        # "fever" and "high fever" both score on "high fever"
        keywords=("fever", "high fever", "body ache", "muscle ache", "chills", "fatigue", "severe fatigue"),
        explanation="Seasonal viral illness that can be more severe than a cold.",
        advice=(
            "Rest, fluids, consider antivirals if early and high risk. "
            "See doctor especially if shortness of breath or high fever."
        ),
    ),
    ConditionEntry(
        name="Allergic rhinitis (allergy)",
        keywords=("itchy eyes", "itchy", "sneezing", "watery eyes", "allergy"),
        explanation="Allergic reaction — often seasonal or to indoor allergens.",
        advice="Antihistamines, avoid triggers. See allergist if persistent.",
    ),
    ConditionEntry(
        name="Migraine / Tension headache",
        keywords=("headache", "migraine", "throbbing", "sensitivity to light", "sensitivity to sound", "aura"),
        explanation="Headache disorders vary — migraines often have light/sound sensitivity.",
        advice=(
            "Rest in a dark room, OTC pain relief. "
            "Seek urgent care for sudden severe headache or neurologic deficits."
        ),
    ),
    ConditionEntry(
        name="Gastroenteritis (stomach flu / food poisoning)",
        keywords=("vomiting", "diarrhea", "stomach pain", "nausea", "abdominal cramps"),
        explanation="Often viral or foodborne; causes vomiting & diarrhea.",
        advice=(
            "Stay hydrated, use ORS if needed, rest. "
            "Seek care for severe dehydration, bloody stools, or high fever."
        ),
    ),
    ConditionEntry(
        name="Urinary tract infection (UTI)",
        keywords=("burning urination", "frequent urination", "urinary frequency", "pelvic pain"),
        explanation="Common bacterial infection of urinary tract, particularly in females.",
        advice="See a clinician for urine testing and antibiotics if confirmed.",
    ),
)

RED_FLAGS: tuple[RedFlagEntry, ...] = (
    RedFlagEntry(
        keywords=("chest pain", "pressure in chest", "squeezing chest", "severe chest pain"),
        message="Chest pain can be a sign of a heart attack — seek emergency care immediately.",
    ),
    RedFlagEntry(
        keywords=(
            "difficulty breathing",
            "shortness of breath",
            "cant breathe",
            "unable to breathe",
            "severe breathlessness",
        ),
        message="Difficulty breathing is urgent — seek emergency care now.",
    ),
    RedFlagEntry(
        keywords=("severe bleeding", "uncontrolled bleeding"),
        message="Severe bleeding — go to emergency department immediately.",
    ),
    RedFlagEntry(
        keywords=("loss of consciousness", "fainting", "passed out"),
        message="Loss of consciousness — seek emergency help right away.",
    ),
    RedFlagEntry(
        keywords=("sudden weakness", "sudden numbness", "facial droop", "slurred speech"),
        message="Possible stroke symptoms — call emergency services immediately.",
    ),
)

FALLBACK_NAME = "Uncertain / Not detected"
FALLBACK_EXPLANATION = (
    "The symptoms you provided do not strongly match the limited set of common conditions this demo checks for."
)
FALLBACK_ADVICE = (
    "This demo is intentionally limited. For persistent, worsening, or concerning symptoms, "
    "see a healthcare professional. If symptoms are severe, seek emergency care."
)
