"""
Static lexicon and taxonomy tables for review scoring.

Everything in this module is read-only data built once at import time.
Word scores follow the AFINN / VADER convention (-4 to +4: 1-2 mild,
2-3 moderate, 3-4 strong).  Phrase weights run a little wider (-5 to +5)
because idioms like "bait and switch" carry meaning a single-word lexicon
misses entirely.

VADER's own lexicon is used as a fallback for words the domain table does
not know; see vader_word_score().
"""

from types import MappingProxyType

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from . import config


# ---------------------------------------------------------------------------
# Multi-word phrases
# ---------------------------------------------------------------------------
NEGATIVE_PHRASES = (
    ("bait and switch", -4), ("do not recommend", -3), ("don't recommend", -3),
    ("waste of time", -3), ("waste of money", -4), ("rip off", -4), ("ripoff", -4),
    ("ripped off", -4), ("stay away", -4), ("beware", -3), ("be warned", -3),
    ("never again", -3), ("never come back", -3), ("never go back", -3),
    ("never going back", -3), ("never returning", -3), ("worst experience", -4),
    ("worst ever", -4), ("total disaster", -4), ("complete disaster", -4),
    ("absolutely terrible", -4), ("absolutely horrible", -4), ("scam", -4),
    ("con artist", -5), ("fraud", -5), ("fraudulent", -5), ("dishonest", -4),
    ("took advantage", -3), ("taken advantage", -3), ("not worth", -3),
    ("zero stars", -5), ("0 stars", -5), ("wish i could give zero", -5),
    ("health hazard", -5), ("food poisoning", -5), ("got sick", -4),
    ("made me sick", -4), ("called the police", -5), ("filed a complaint", -4),
    ("better business bureau", -3), ("report them", -4), ("sue", -3),
    ("lawyer", -2), ("discrimination", -5), ("discriminated", -5),
    ("racist", -5), ("sexist", -5), ("harassed", -5), ("harassment", -5),
    ("threatened", -5), ("unsafe", -4), ("dangerous", -4),
    ("very disappointed", -3), ("extremely disappointed", -4),
    ("highly disappointed", -3), ("so disappointed", -3),
    ("not impressed", -2), ("underwhelmed", -2), ("overrated", -2),
    ("overhyped", -2), ("misleading", -3), ("false advertising", -4),
    ("lied to", -4), ("lied", -3), ("lies", -3), ("deceptive", -4),
    ("unprofessional", -3), ("incompetent", -3), ("careless", -2),
    ("couldn't care less", -3), ("don't care", -2), ("ignored me", -3),
    ("ignored us", -3), ("walked out", -3), ("left without", -2),
    ("no accountability", -3), ("no responsibility", -3),
    ("price gouging", -4), ("highway robbery", -4), ("stole", -4),
    ("stolen", -4), ("broke", -2), ("broken", -2), ("damaged", -2),
    ("ruined", -3), ("destroyed", -3),
)

POSITIVE_PHRASES = (
    ("highly recommend", 4), ("highly recommended", 4), ("can't recommend enough", 5),
    ("above and beyond", 4), ("went above and beyond", 4), ("exceeded expectations", 4),
    ("five stars", 4), ("5 stars", 4), ("top notch", 4), ("top-notch", 4),
    ("first class", 4), ("first-class", 4), ("world class", 5), ("world-class", 5),
    ("best in town", 4), ("best in the city", 4), ("best ever", 4),
    ("life changing", 5), ("life-changing", 5), ("game changer", 4),
    ("hidden gem", 4), ("pleasant surprise", 3), ("blown away", 4),
    ("absolutely amazing", 4), ("absolutely wonderful", 4), ("absolutely fantastic", 4),
    ("truly exceptional", 5), ("truly outstanding", 5), ("truly remarkable", 4),
    ("can't say enough", 4), ("nothing but praise", 4), ("couldn't be happier", 4),
    ("couldn't ask for more", 4), ("second to none", 4), ("a cut above", 3),
    ("worth every penny", 4), ("worth the money", 3), ("great value", 3),
    ("fair price", 3), ("reasonable price", 2), ("well worth", 3),
    ("very professional", 3), ("extremely professional", 4),
    ("very helpful", 3), ("extremely helpful", 4), ("so helpful", 3),
    ("very friendly", 3), ("extremely friendly", 4), ("warm and welcoming", 3),
    ("attention to detail", 3), ("went the extra mile", 4),
    ("look forward to", 2), ("coming back", 2), ("will return", 2),
    ("must visit", 3), ("don't miss", 3),
)

# ---------------------------------------------------------------------------
# Single-word lexicon (AFINN-inspired, extended for local business reviews)
# ---------------------------------------------------------------------------
WORD_SCORES = MappingProxyType({
    # Strong negatives
    "terrible": -4, "horrible": -4, "awful": -4, "dreadful": -4, "atrocious": -4,
    "abysmal": -4, "disgusting": -4, "revolting": -4, "appalling": -4, "pathetic": -3,
    "worst": -4, "hate": -3, "hated": -3, "angry": -3, "furious": -4, "outraged": -4,
    "unacceptable": -3, "inexcusable": -4, "deplorable": -4, "abominable": -4,
    # Moderate negatives
    "bad": -2, "poor": -2, "disappointing": -2, "disappointed": -2, "mediocre": -2,
    "subpar": -2, "lackluster": -2, "underwhelming": -2, "frustrating": -2,
    "annoying": -2, "irritating": -2, "unpleasant": -2, "uncomfortable": -2,
    "rude": -3, "disrespectful": -3, "dismissive": -2, "arrogant": -2,
    "slow": -1, "cold": -1, "dirty": -2, "filthy": -3, "messy": -2,
    "overpriced": -2, "expensive": -1, "stale": -2, "bland": -1,
    # Mild negatives
    "okay": -0.5, "ok": -0.5, "meh": -1, "average": -0.5, "nothing": -0.5,
    # Mild positives
    "good": 1, "nice": 1, "decent": 1, "fine": 0.5, "alright": 0.5,
    "pleasant": 1, "satisfactory": 1, "adequate": 0.5,
    # Moderate positives
    "great": 2, "excellent": 3, "wonderful": 3, "fantastic": 3, "awesome": 3,
    "amazing": 3, "outstanding": 3, "superb": 3, "brilliant": 3, "marvelous": 3,
    "exceptional": 3, "impressive": 2, "remarkable": 2, "delightful": 2,
    "lovely": 2, "beautiful": 2, "perfect": 3, "phenomenal": 3, "incredible": 3,
    "magnificent": 3, "splendid": 3, "stellar": 3, "fabulous": 3,
    "friendly": 2, "helpful": 2, "professional": 2, "courteous": 2,
    "knowledgeable": 2, "attentive": 2, "efficient": 2, "thorough": 2,
    "clean": 1, "fresh": 1, "delicious": 2, "tasty": 2, "yummy": 2,
    # Strong positives
    "love": 3, "loved": 3, "adore": 3, "treasure": 3, "cherish": 3,
    "extraordinary": 4, "miraculous": 4, "flawless": 4, "impeccable": 4,
    # Special words
    "recommend": 2, "recommended": 2,
})

# ---------------------------------------------------------------------------
# Contextual modifiers
# ---------------------------------------------------------------------------
NEGATORS = frozenset({
    "not", "no", "never", "neither", "nor", "nobody", "nothing",
    "nowhere", "hardly", "barely", "scarcely", "n't", "dont", "don't",
    "doesnt", "doesn't", "didnt", "didn't", "wasnt", "wasn't",
    "werent", "weren't", "wont", "won't", "wouldnt", "wouldn't",
    "shouldnt", "shouldn't", "cant", "can't", "cannot", "without",
    "isnt", "isn't", "arent", "aren't",
})

INTENSIFIERS = MappingProxyType({
    "very": 1.3, "really": 1.3, "extremely": 1.5, "incredibly": 1.5,
    "absolutely": 1.4, "totally": 1.3, "completely": 1.3, "utterly": 1.4,
    "quite": 1.1, "particularly": 1.2, "especially": 1.2, "remarkably": 1.3,
    "exceptionally": 1.4, "so": 1.2, "such": 1.2, "super": 1.3,
})

# Two-word diminishers ("a bit", "a little") are looked up with the two
# preceding tokens joined by a space.
DIMINISHERS = MappingProxyType({
    "somewhat": 0.6, "slightly": 0.5, "barely": 0.4, "hardly": 0.4,
    "kind": 0.7, "sort": 0.7, "almost": 0.7, "nearly": 0.8,
    "fairly": 0.8, "rather": 0.7, "a bit": 0.6, "a little": 0.5,
})

# ---------------------------------------------------------------------------
# Emotion taxonomy (ten categories)
# ---------------------------------------------------------------------------
EMOTION_KEYWORDS = (
    ("Anger", ("angry", "furious", "outraged", "infuriated", "livid", "fuming",
               "enraged", "irate", "unacceptable", "disgusted", "disgusting")),
    ("Frustration", ("frustrated", "annoying", "irritating", "waited", "slow",
                     "wasted", "ridiculous", "useless", "pointless", "incompetent")),
    ("Disappointment", ("disappointed", "disappointing", "letdown", "let down",
                        "expected better", "underwhelming", "mediocre",
                        "not what i expected")),
    ("Fear/Concern", ("unsafe", "dangerous", "scared", "worried", "concerning",
                      "alarming", "beware", "warning", "health hazard")),
    ("Sadness", ("sad", "heartbroken", "devastated", "crushed", "miss",
                 "unfortunately", "regret", "shame", "too bad")),
    ("Joy", ("amazing", "wonderful", "fantastic", "love", "loved", "awesome",
             "delighted", "happy", "thrilled", "ecstatic", "overjoyed")),
    ("Gratitude", ("thank", "grateful", "appreciate", "thankful", "thanks",
                   "blessed", "indebted")),
    ("Trust", ("reliable", "professional", "trustworthy", "honest", "dependable",
               "consistent", "integrity")),
    ("Surprise", ("surprised", "unexpected", "shocked", "wow", "blown away",
                  "exceeded", "astonished", "stunned")),
    ("Contempt", ("scam", "fraud", "con", "crook", "liar", "cheat", "shameless",
                  "pathetic", "joke", "laughable")),
)

# ---------------------------------------------------------------------------
# Business aspects
# ---------------------------------------------------------------------------
ASPECT_KEYWORDS = (
    ("Service", ("service", "staff", "employee", "employees", "team", "crew",
                 "server", "waiter", "waitress", "manager", "receptionist")),
    ("Food/Product", ("food", "meal", "dish", "menu", "taste", "flavor",
                      "product", "item", "quality")),
    ("Price", ("price", "prices", "cost", "expensive", "cheap", "affordable",
               "value", "worth", "overpriced", "reasonable")),
    ("Cleanliness", ("clean", "dirty", "filthy", "hygiene", "sanitary",
                     "spotless", "tidy", "messy")),
    ("Atmosphere", ("atmosphere", "ambiance", "ambience", "vibe", "decor",
                    "music", "lighting", "cozy", "comfortable")),
    ("Wait Time", ("wait", "waited", "waiting", "slow", "fast", "quick",
                   "prompt", "delay", "hour", "hours", "minutes")),
    ("Location", ("location", "parking", "accessible", "convenient",
                  "easy to find")),
    ("Communication", ("communication", "response", "call", "called", "email",
                       "phone", "contact", "follow up")),
)

# ---------------------------------------------------------------------------
# Content themes
# ---------------------------------------------------------------------------
COMPLAINT_THEMES = (
    ("Wait Times", ("wait", "waited", "slow", "long", "forever", "delay",
                    "took forever", "hours")),
    ("Customer Service", ("rude", "unfriendly", "ignored", "unprofessional",
                          "attitude", "dismissive", "disrespectful")),
    ("Quality", ("poor", "broken", "defective", "cheap", "flimsy", "subpar",
                 "poor quality")),
    ("Cleanliness", ("dirty", "filthy", "messy", "unclean", "unsanitary",
                     "smell", "gross")),
    ("Pricing", ("expensive", "overpriced", "ripoff", "overcharged", "not worth",
                 "price gouging")),
    ("Communication", ("no response", "never called", "unreachable", "ghosted",
                       "voicemail")),
    ("Dishonesty", ("bait and switch", "lied", "misleading", "false", "scam",
                    "fraud", "deceptive")),
    ("Safety", ("unsafe", "dangerous", "hazard", "health", "injury", "accident")),
)

PRAISE_THEMES = (
    ("Service Quality", ("excellent", "amazing", "outstanding", "exceptional",
                         "fantastic", "wonderful", "superb")),
    ("Staff", ("friendly", "helpful", "kind", "polite", "knowledgeable",
               "patient", "caring")),
    ("Value", ("great value", "worth", "reasonable", "fair price", "affordable",
               "good deal", "worth every penny")),
    ("Atmosphere", ("welcoming", "cozy", "comfortable", "clean", "beautiful",
                    "nice ambiance", "inviting")),
    ("Expertise", ("professional", "expert", "skilled", "experienced",
                   "talented", "thorough")),
    ("Reliability", ("reliable", "dependable", "consistent", "trustworthy",
                     "on time", "punctual")),
    ("Results", ("perfect", "exceeded", "impressed", "blown away",
                 "above and beyond", "transformed")),
)

SERVICE_KEYWORDS = (
    ("Installation", ("install", "installation", "setup", "set up", "mounting")),
    ("Repair", ("repair", "fix", "fixed", "fixing", "restoration", "restore")),
    ("Consultation", ("consult", "consultation", "advice", "recommend",
                      "estimate", "quote")),
    ("Delivery", ("deliver", "delivery", "shipping", "arrived", "package")),
    ("Maintenance", ("maintenance", "upkeep", "inspection", "check", "tune")),
    ("Support", ("support", "help", "assist", "assistance", "customer service")),
)

COMPETITOR_INDICATORS = (
    "better than", "worse than", "compared to", "unlike", "switched from",
    "went to", "used to go to", "prefer", "instead of",
)

# ---------------------------------------------------------------------------
# Owner responses
# ---------------------------------------------------------------------------
EMPATHY_WORDS = ("sorry", "apologize", "apologise", "understand", "appreciate",
                 "thank you", "grateful", "value", "care", "concern", "improve")
RESOLUTION_WORDS = ("resolve", "fix", "address", "correct", "refund", "replace",
                    "compensate", "follow up", "contact us", "reach out")
DEFENSIVE_WORDS = ("actually", "however", "incorrect", "wrong", "false",
                   "untrue", "never happened", "disagree")

# ---------------------------------------------------------------------------
# Trust scorer
# ---------------------------------------------------------------------------
GENERIC_REVIEW_TEXTS = frozenset({
    "great place", "nice place", "good", "excellent", "best place",
    "highly recommend", "wonderful place", "amazing place",
})

# ---------------------------------------------------------------------------
# Content stop words / name filters
# ---------------------------------------------------------------------------
STOP_WORDS = frozenset({
    "the", "a", "an", "is", "are", "was", "were", "be", "been", "being", "have",
    "has", "had", "do", "does", "did", "will", "would", "shall", "should", "may",
    "might", "must", "can", "could", "to", "of", "in", "for", "on", "with", "at",
    "by", "from", "as", "into", "through", "during", "before", "after", "above",
    "below", "between", "out", "off", "up", "down", "this", "that", "these",
    "those", "i", "me", "my", "we", "our", "you", "your", "he", "she", "it",
    "they", "them", "their", "what", "which", "who", "when", "where", "how",
    "all", "each", "every", "both", "few", "more", "most", "other", "some",
    "such", "no", "not", "only", "same", "so", "than", "too", "very", "just",
    "and", "but", "or", "if", "while", "because", "about", "get", "got", "also",
    "back", "even", "well", "way", "much", "here", "there", "really", "like",
    "go", "going", "one", "two", "first", "time", "new", "now", "come", "came",
    "make", "made", "give", "over", "know", "its", "then", "her", "him", "his",
    "any", "own", "say", "said", "thing", "dont", "didnt", "ive", "ill", "lets",
    "let", "still", "ever", "yet",
})

NON_NAME_WORDS = frozenset({
    "The", "This", "They", "Thank", "Thanks", "Great", "Good", "Would", "Will",
    "Very", "Not", "Amazing", "Excellent", "Monday", "Tuesday", "Wednesday",
    "Thursday", "Friday", "Saturday", "Sunday", "January", "February", "March",
    "April", "May", "June", "July", "August", "September", "October",
    "November", "December", "Google", "Yelp",
})

# ---------------------------------------------------------------------------
# VADER fallback
# ---------------------------------------------------------------------------
_vader = SentimentIntensityAnalyzer()

# Function words VADER scores that read as sentiment only in social-media
# usage ("like", "yes", "please").
_VADER_EXCLUDED = frozenset({
    "like", "likes", "liked", "yes", "no", "please", "want", "wants", "ok",
    "okay", "pretty", "well", "kind", "sort", "matter", "help", "care",
})


def vader_word_score(word: str) -> float:
    """
    Score a word the domain lexicon does not know, using VADER's lexicon.

    Returns 0.0 for unknown words, modifiers, and excluded function words.
    """
    if (
        word in _VADER_EXCLUDED
        or word in NEGATORS
        or word in INTENSIFIERS
        or word in DIMINISHERS
    ):
        return 0.0
    return _vader.lexicon.get(word, 0.0) * config.VADER_FALLBACK_WEIGHT


def word_score(word: str) -> float:
    """Domain lexicon score for a token, falling back to VADER."""
    score = WORD_SCORES.get(word)
    if score is not None:
        return float(score)
    return vader_word_score(word)
