"""
Keyword rule tables for the two emotion sets.

A rule fires when any of its trigger phrases occurs anywhere in the
lowercased text (plain substring containment, no tokenization). When it
fires, the target key gains ``uniform(low, high)`` and each related key
gains ``factor * uniform(low, high)`` from a fresh draw.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Type

from emotion_detection.core import BaseEmotion, ExpandedEmotion

E = ExpandedEmotion

STRONG = (0.2, 0.9)
SITUATIONAL = (0.1, 0.8)

DEFAULT_EXPLANATION = "No strong emotional indicators were found; the text reads as neutral."


@dataclass(frozen=True)
class EmotionRule:
    triggers: Tuple[str, ...]
    target: str
    low: float = STRONG[0]
    high: float = STRONG[1]
    related: Tuple[Tuple[str, float], ...] = ()
    clause: str = ""

    def matches(self, text_lower: str) -> bool:
        return any(t in text_lower for t in self.triggers)


@dataclass(frozen=True)
class EmotionSetConfig:
    name: str
    emotions: Type[Enum]
    rules: Tuple[EmotionRule, ...]
    floor: float
    jitter: float
    fallback: str
    neutral_key: Optional[str] = None
    neutral_floor: float = 0.0
    neutral_threshold: float = 0.0
    neutral_factor: float = 0.0
    neutral_min: float = 0.0
    explain: bool = False

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(e.value for e in self.emotions)


def _rule(triggers, target, strength=STRONG, related=(), clause=""):
    return EmotionRule(
        triggers=tuple(triggers),
        target=target.value,
        low=strength[0],
        high=strength[1],
        related=tuple((k.value, f) for k, f in related),
        clause=clause,
    )


BASE_RULES: Tuple[EmotionRule, ...] = (
    _rule(("happy", "joy", "excited", "great", "wonderful", "amazing"), BaseEmotion.JOY),
    _rule(("angry", "mad", "furious", "annoyed", "frustrated"), BaseEmotion.ANGER),
    _rule(("scared", "afraid", "worried", "anxious", "nervous"), BaseEmotion.FEAR),
    _rule(("sad", "depressed", "lonely", "disappointed", "hurt"), BaseEmotion.SADNESS),
    _rule(("disgusting", "gross", "awful", "terrible", "horrible"), BaseEmotion.DISGUST),
)

EXPANDED_RULES: Tuple[EmotionRule, ...] = (
    # Matching is plain containment, so a bare stem that sits inside a
    # common word (presentation, unhappy, teacher) is written as a phrase.
    # Affective, positive
    _rule(("so happy", "i'm happy", "i am happy", "very happy", "really happy", "feel happy", "feeling happy",
           "glad", "cheerful", "delighted"), E.HAPPY,
          related=((E.JOYFUL, 0.7), (E.CONTENT, 0.6)),
          clause="Expressions of happiness point to joy and contentment."),
    _rule(("excited", "thrilled", "ecstatic", "can't wait"), E.EXCITED,
          related=((E.ENERGIZED, 0.7), (E.HAPPY, 0.6)),
          clause="Excitement and anticipation raise energy."),
    _rule(("wonderful", "amazing", "fantastic", "awesome", "feel great", "feeling great", "so great",
           "going great", "perfectly"), E.JOYFUL,
          related=((E.HAPPY, 0.6),),
          clause="Strongly positive evaluations suggest joy."),
    _rule(("thank you", "thanks", "thankful", "so grateful", "i'm grateful", "i am grateful", "i appreciate",
           "appreciate it"), E.GRATEFUL,
          related=((E.APPRECIATED, 0.6), (E.CONNECTED, 0.6)),
          clause="Gratitude language signals appreciation and connection."),
    _rule(("hopeful", "i hope", "optimistic", "looking forward"), E.HOPEFUL, SITUATIONAL,
          related=((E.MOTIVATED, 0.6),),
          clause="Forward-looking language suggests hope."),
    _rule(("proud", "accomplished", "achieved"), E.PROUD,
          related=((E.DETERMINED, 0.6), (E.HAPPY, 0.6)),
          clause="Mentions of achievement indicate pride."),
    _rule(("relieved", "relief", "finally over"), E.RELIEVED,
          related=((E.RELAXED, 0.7),),
          clause="Relief language lowers tension."),
    _rule(("funny", "hilarious", "laughing", "laughed", "haha"), E.AMUSED, SITUATIONAL,
          related=((E.HAPPY, 0.6),),
          clause="Humor cues suggest amusement."),
    _rule(("i love", "in love", "loving", "adore", "cherish"), E.LOVING,
          related=((E.CONNECTED, 0.7), (E.HAPPY, 0.6)),
          clause="Affectionate words express love and closeness."),
    # Affective, negative
    _rule(("so sad", "feel sad", "i'm sad", "i am sad", "sadness", "sadly", "unhappy", "crying", "in tears",
           "depressed"), E.SAD,
          related=((E.DISAPPOINTED, 0.6),),
          clause="Sadness cues were found."),
    _rule(("lonely", "alone", "isolated", "no one"), E.LONELY,
          related=((E.SAD, 0.7), (E.REJECTED, 0.6)),
          clause="Isolation language points to loneliness."),
    _rule(("disappointed", "let down", "letdown"), E.DISAPPOINTED,
          related=((E.SAD, 0.6),),
          clause="Unmet expectations suggest disappointment."),
    _rule(("grief", "grieving", "mourning", "passed away", "funeral"), E.GRIEVING,
          related=((E.SAD, 0.8), (E.PAINED, 0.6)),
          clause="References to loss indicate grief."),
    _rule(("angry", "furious", "livid", "enraged", "mad at", "i hate", "hated"), E.ANGRY,
          related=((E.IRRITATED, 0.7), (E.RESENTFUL, 0.6)),
          clause="Hostile wording signals anger."),
    _rule(("frustrat", "fed up", "annoyed", "irritat"), E.FRUSTRATED,
          related=((E.IRRITATED, 0.8), (E.ANGRY, 0.6)),
          clause="Frustration raises irritation and anger."),
    _rule(("resentful", "resentment", "i resent", "unfair", "bitter"), E.RESENTFUL, SITUATIONAL,
          related=((E.ANGRY, 0.6),),
          clause="Perceived unfairness suggests resentment."),
    _rule(("scared", "afraid", "terrified", "frightened", "scary", "fearful", "i fear", "in fear"), E.AFRAID,
          related=((E.ANXIOUS, 0.7), (E.NERVOUS, 0.6)),
          clause="Fear words indicate fright and unease."),
    _rule(("anxious", "anxiety", "worried", "worrying", "panic", "stressed"), E.ANXIOUS,
          related=((E.NERVOUS, 0.7), (E.OVERWHELMED, 0.6)),
          clause="Worry language points to anxiety."),
    _rule(("nervous", "jittery", "the presentation", "my presentation", "a presentation", "upcoming presentation",
           "exams", "job interview", "an interview", "my interview"), E.NERVOUS, SITUATIONAL,
          related=((E.ANXIOUS, 0.6),),
          clause="Evaluative situations suggest nervousness."),
    _rule(("disgust", "revolting", "repulsive", "so gross", "that's gross"), E.DISGUSTED,
          related=((E.SICK, 0.6),),
          clause="Aversion words signal disgust."),
    _rule(("surprise", "shocked", "unexpected", "can't believe", "wow"), E.SURPRISED,
          related=((E.CURIOUS, 0.6),),
          clause="Unexpected events indicate surprise."),
    _rule(("confused", "confusing", "puzzled", "unclear", "don't understand"), E.CONFUSED, SITUATIONAL,
          related=((E.OVERWHELMED, 0.6),),
          clause="Uncertainty about meaning suggests confusion."),
    _rule(("embarrass", "awkward", "humiliat"), E.EMBARRASSED,
          related=((E.NERVOUS, 0.6),),
          clause="Social discomfort suggests embarrassment."),
    _rule(("guilty", "ashamed", "my fault", "regret", "sorry"), E.GUILTY,
          related=((E.SAD, 0.6),),
          clause="Self-blame indicates guilt."),
    _rule(("jealous", "envy", "envious"), E.JEALOUS,
          related=((E.RESENTFUL, 0.7),),
          clause="Comparison with others suggests jealousy."),
    _rule(("i'm bored", "i am bored", "so bored", "boredom", "so boring", "really boring", "tedious", "dull"),
          E.BORED, SITUATIONAL,
          related=((E.TIRED, 0.6),),
          clause="Lack of stimulation suggests boredom."),
    # Physical
    _rule(("so tired", "i'm tired", "i am tired", "feeling tired", "exhausted", "sleepy", "worn out", "drained"),
          E.TIRED,
          related=((E.OVERWHELMED, 0.6),),
          clause="Fatigue words indicate tiredness."),
    _rule(("energized", "energetic", "pumped", "refreshed"), E.ENERGIZED,
          related=((E.MOTIVATED, 0.7),),
          clause="High-energy language suggests vitality."),
    _rule(("sick", "nausea", "nauseous", "unwell", "fever"), E.SICK,
          related=((E.PAINED, 0.6), (E.TIRED, 0.6)),
          clause="Illness cues indicate physical discomfort."),
    _rule(("in pain", "painful", "hurts", "aching", "headache", "stomachache", "injured"), E.PAINED,
          related=((E.TIRED, 0.6),),
          clause="Pain references indicate physical distress."),
    _rule(("relaxed", "calm", "peaceful"), E.RELAXED, SITUATIONAL,
          related=((E.CONTENT, 0.7),),
          clause="Calm language suggests relaxation."),
    _rule(("hungry", "starving", "famished"), E.HUNGRY, SITUATIONAL,
          related=((E.IRRITATED, 0.6),),
          clause="Hunger cues were found."),
    # Social
    _rule(("rejected", "ignored", "felt left out", "left me out", "excluded", "unwanted"), E.REJECTED,
          related=((E.LONELY, 0.7), (E.SAD, 0.6)),
          clause="Exclusion language points to rejection."),
    _rule(("feel appreciated", "felt appreciated", "feel valued", "felt valued", "praised"), E.APPRECIATED,
          SITUATIONAL,
          related=((E.PROUD, 0.6),),
          clause="Recognition from others suggests feeling appreciated."),
    _rule(("betray", "backstab", "cheated", "lied to me"), E.BETRAYED,
          related=((E.ANGRY, 0.7), (E.SAD, 0.6)),
          clause="Broken trust indicates betrayal."),
    _rule(("friends", "together", "family", "i belong"), E.CONNECTED, SITUATIONAL,
          related=((E.CONTENT, 0.6),),
          clause="References to close relationships suggest connection."),
    # Motivational
    _rule(("i'm determined", "i am determined", "so determined", "won't give up", "fully committed", "i will"),
          E.DETERMINED, SITUATIONAL,
          related=((E.MOTIVATED, 0.7),),
          clause="Resolute language suggests determination."),
    _rule(("i'm motivated", "feel motivated", "so motivated", "feel inspired", "so inspired", "let's go",
           "i'm ready", "i am ready"), E.MOTIVATED, SITUATIONAL,
          related=((E.ENERGIZED, 0.6),),
          clause="Drive toward action suggests motivation."),
    _rule(("overwhelm", "too much", "can't cope", "swamped"), E.OVERWHELMED,
          related=((E.ANXIOUS, 0.7), (E.TIRED, 0.6)),
          clause="Overload language indicates being overwhelmed."),
    _rule(("curious", "intrigued", "i'm interested", "so interested", "i wonder", "wondering"), E.CURIOUS,
          SITUATIONAL,
          related=((E.EXCITED, 0.5),),
          clause="Inquisitive language suggests curiosity."),
)


BASE_SET = EmotionSetConfig(
    name="original",
    emotions=BaseEmotion,
    rules=BASE_RULES,
    floor=0.1,
    jitter=0.3,
    fallback=BaseEmotion.JOY.value,
)

EXPANDED_SET = EmotionSetConfig(
    name="expanded",
    emotions=ExpandedEmotion,
    rules=EXPANDED_RULES,
    floor=0.02,
    jitter=0.2,
    fallback=ExpandedEmotion.NEUTRAL.value,
    neutral_key=ExpandedEmotion.NEUTRAL.value,
    neutral_floor=0.3,
    neutral_threshold=1.2,
    neutral_factor=0.5,
    neutral_min=0.05,
    explain=True,
)
