# services/disc_engine/definitions.py
# Static lookup tables for the DISC assessment: wheel archetypes, bipolar axes,
# perception adjectives, delta interpretations and value categories.
# Loaded once at import time and never mutated.

from .models import LocalizedText, WheelArchetype

# Fixed tie-break priority: on equal scores D wins over I, I over S, S over C.
DIMENSIONS = ('D', 'I', 'S', 'C')

DIMENSION_LABELS = {
    'D': LocalizedText(fr='Dominance', en='Dominance'),
    'I': LocalizedText(fr='Influence', en='Influence'),
    'S': LocalizedText(fr='Stabilité', en='Stability'),
    'C': LocalizedText(fr='Conformité', en='Conformity'),
}

# --- Classification thresholds ---

SECONDARY_THRESHOLD = 15   # Gap under which the runner-up is reported as secondary
ADAPTIVE_THRESHOLD = 10    # Gap under which extra questions are administered
BLEND_THRESHOLD = 20       # Gap under which the wheel looks for a blended archetype

LIKERT_MIN = 1
LIKERT_MAX = 5

# --- Wheel archetypes (clockwise, position 1 at the top) ---

WHEEL_ARCHETYPES = (
    WheelArchetype(id='DIRECTIF', position=1, primary='D', secondary=None,
                   label=LocalizedText(fr='Directif', en='Directive')),
    WheelArchetype(id='PROMOUVANT', position=2, primary='D', secondary='I',
                   label=LocalizedText(fr='Promouvant', en='Promoting')),
    WheelArchetype(id='EXPANSIF', position=3, primary='I', secondary=None,
                   label=LocalizedText(fr='Expansif', en='Expansive')),
    WheelArchetype(id='FACILITANT', position=4, primary='I', secondary='S',
                   label=LocalizedText(fr='Facilitant', en='Facilitating')),
    WheelArchetype(id='COOPERATIF', position=5, primary='S', secondary=None,
                   label=LocalizedText(fr='Coopératif', en='Cooperative')),
    WheelArchetype(id='COORDONNANT', position=6, primary='S', secondary='C',
                   label=LocalizedText(fr='Coordonnant', en='Coordinating')),
    WheelArchetype(id='NORMATIF', position=7, primary='C', secondary=None,
                   label=LocalizedText(fr='Normatif', en='Normative')),
    WheelArchetype(id='ORGANISANT', position=8, primary='C', secondary='D',
                   label=LocalizedText(fr='Organisant', en='Organizing')),
)

WHEEL_SIZE = len(WHEEL_ARCHETYPES)
ARCHETYPES_BY_ID = {a.id: a for a in WHEEL_ARCHETYPES}
ARCHETYPES_BY_POSITION = {a.position: a for a in WHEEL_ARCHETYPES}

# --- Bipolar axes ---
# Each pole is a weighted sum of base scores: {dimension: weight}.
# value = round((right - left) / (left + right) * 100)

DISC_BIPOLAR_AXES = [
    {
        'id': 'pace',
        'left': {'S': 1.0, 'C': 1.0},
        'right': {'D': 1.0, 'I': 1.0},
        'left_label': LocalizedText(fr='Réfléchi', en='Reflective'),
        'right_label': LocalizedText(fr='Actif', en='Active'),
    },
    {
        'id': 'orientation',
        'left': {'D': 1.0, 'C': 1.0},
        'right': {'I': 1.0, 'S': 1.0},
        'left_label': LocalizedText(fr='Orienté tâches', en='Task-oriented'),
        'right_label': LocalizedText(fr='Orienté personnes', en='People-oriented'),
    },
    {
        'id': 'assertion',
        'left': {'D': 1.0},
        'right': {'I': 1.0},
        'left_label': LocalizedText(fr='Directif', en='Directive'),
        'right_label': LocalizedText(fr='Persuasif', en='Persuasive'),
    },
    {
        'id': 'method',
        'left': {'S': 1.0},
        'right': {'C': 1.0},
        'left_label': LocalizedText(fr='Accompagnant', en='Supportive'),
        'right_label': LocalizedText(fr='Analytique', en='Analytical'),
    },
    {
        'id': 'tempo',
        'left': {'D': 1.0, 'I': 0.5},
        'right': {'S': 1.0, 'C': 0.5},
        'left_label': LocalizedText(fr='Dynamique', en='Dynamic'),
        'right_label': LocalizedText(fr='Posé', en='Steady'),
    },
    {
        'id': 'spontaneity',
        'left': {'I': 1.0, 'S': 0.5},
        'right': {'C': 1.0, 'D': 0.5},
        'left_label': LocalizedText(fr='Spontané', en='Spontaneous'),
        'right_label': LocalizedText(fr='Maîtrisé', en='Controlled'),
    },
    {
        'id': 'stance',
        'left': {'D': 1.0},
        'right': {'S': 1.0},
        'left_label': LocalizedText(fr='Compétitif', en='Competitive'),
        'right_label': LocalizedText(fr='Conciliant', en='Accommodating'),
    },
    {
        'id': 'expression',
        'left': {'I': 1.0},
        'right': {'C': 1.0},
        'left_label': LocalizedText(fr='Expressif', en='Expressive'),
        'right_label': LocalizedText(fr='Réservé', en='Reserved'),
    },
]

# --- Perception adjectives ---

PERCEPTION_SLICE = 3

PERCEPTION_ADJECTIVES = {
    'D': {
        'self_positive': [
            LocalizedText(fr='Déterminé', en='Determined'),
            LocalizedText(fr='Direct', en='Direct'),
            LocalizedText(fr='Ambitieux', en='Ambitious'),
            LocalizedText(fr='Décisif', en='Decisive'),
            LocalizedText(fr='Courageux', en='Courageous'),
        ],
        'others_stress': [
            LocalizedText(fr='Autoritaire', en='Authoritarian'),
            LocalizedText(fr='Impatient', en='Impatient'),
            LocalizedText(fr='Brusque', en='Blunt'),
            LocalizedText(fr='Dominateur', en='Domineering'),
            LocalizedText(fr='Intransigeant', en='Inflexible'),
        ],
    },
    'I': {
        'self_positive': [
            LocalizedText(fr='Enthousiaste', en='Enthusiastic'),
            LocalizedText(fr='Sociable', en='Sociable'),
            LocalizedText(fr='Optimiste', en='Optimistic'),
            LocalizedText(fr='Persuasif', en='Persuasive'),
            LocalizedText(fr='Créatif', en='Creative'),
        ],
        'others_stress': [
            LocalizedText(fr='Dispersé', en='Scattered'),
            LocalizedText(fr='Superficiel', en='Superficial'),
            LocalizedText(fr='Bavard', en='Talkative'),
            LocalizedText(fr='Désorganisé', en='Disorganized'),
            LocalizedText(fr='Trop émotif', en='Overly emotional'),
        ],
    },
    'S': {
        'self_positive': [
            LocalizedText(fr='Patient', en='Patient'),
            LocalizedText(fr='Fiable', en='Reliable'),
            LocalizedText(fr="À l'écoute", en='Attentive'),
            LocalizedText(fr='Loyal', en='Loyal'),
            LocalizedText(fr='Calme', en='Calm'),
        ],
        'others_stress': [
            LocalizedText(fr='Passif', en='Passive'),
            LocalizedText(fr='Résistant au changement', en='Resistant to change'),
            LocalizedText(fr='Hésitant', en='Hesitant'),
            LocalizedText(fr='Têtu', en='Stubborn'),
            LocalizedText(fr='Renfermé', en='Withdrawn'),
        ],
    },
    'C': {
        'self_positive': [
            LocalizedText(fr='Rigoureux', en='Rigorous'),
            LocalizedText(fr='Précis', en='Precise'),
            LocalizedText(fr='Analytique', en='Analytical'),
            LocalizedText(fr='Méthodique', en='Methodical'),
            LocalizedText(fr='Consciencieux', en='Conscientious'),
        ],
        'others_stress': [
            LocalizedText(fr='Froid', en='Cold'),
            LocalizedText(fr='Critique', en='Critical'),
            LocalizedText(fr='Perfectionniste', en='Perfectionist'),
            LocalizedText(fr='Distant', en='Distant'),
            LocalizedText(fr='Rigide', en='Rigid'),
        ],
    },
}

# --- Natural vs adapted deltas ---

DELTA_LEVELS = [
    (30, 'very-high'),
    (20, 'high'),
    (10, 'moderate'),
]
DELTA_DEAD_ZONE = 5

DELTA_TEXTS = {
    ('D', 'increase'): LocalizedText(
        fr="Vous affichez plus d'affirmation que votre style naturel : votre environnement semble exiger des décisions rapides et davantage de contrôle.",
        en="You show more assertiveness than comes naturally: your environment seems to demand faster decisions and more control.",
    ),
    ('D', 'decrease'): LocalizedText(
        fr="Vous retenez votre affirmation naturelle : votre environnement vous demande peut-être d'être plus consensuel.",
        en="You are holding back your natural assertiveness: your environment may be asking you to be more consensual.",
    ),
    ('I', 'increase'): LocalizedText(
        fr="Vous vous montrez plus sociable et expressif que votre nature : votre rôle sollicite fortement votre communication.",
        en="You come across as more sociable and expressive than your nature: your role draws heavily on your communication.",
    ),
    ('I', 'decrease'): LocalizedText(
        fr="Vous modérez votre expressivité naturelle : votre environnement semble attendre plus de retenue.",
        en="You are toning down your natural expressiveness: your environment seems to expect more restraint.",
    ),
    ('S', 'increase'): LocalizedText(
        fr="Vous faites preuve de plus de patience et de constance que votre style naturel : votre contexte valorise la stabilité.",
        en="You show more patience and consistency than your natural style: your context rewards stability.",
    ),
    ('S', 'decrease'): LocalizedText(
        fr="Vous vous adaptez à un rythme plus rapide que votre rythme naturel : cette accélération peut être source de fatigue.",
        en="You are adapting to a faster pace than your natural rhythm: this acceleration can be tiring.",
    ),
    ('C', 'increase'): LocalizedText(
        fr="Vous appliquez plus de rigueur et de structure que votre style naturel : votre environnement exige précision et conformité.",
        en="You apply more rigor and structure than comes naturally: your environment demands precision and compliance.",
    ),
    ('C', 'decrease'): LocalizedText(
        fr="Vous relâchez votre besoin naturel de précision : votre contexte privilégie la vitesse à l'exactitude.",
        en="You are loosening your natural need for precision: your context favours speed over accuracy.",
    ),
}

DELTA_STABLE_TEXT = LocalizedText(
    fr="Votre comportement adapté est cohérent avec votre style naturel sur cette dimension.",
    en="Your adapted behavior is consistent with your natural style on this dimension.",
)

# --- Spranger values ---

VALUE_CATEGORIES = (
    'cognitive', 'aesthetic', 'utilitarian', 'altruistic', 'individual', 'traditional'
)

VALUE_CATEGORY_LABELS = {
    'cognitive': LocalizedText(fr='Cognitif', en='Cognitive'),
    'aesthetic': LocalizedText(fr='Esthétique', en='Aesthetic'),
    'utilitarian': LocalizedText(fr='Utilitaire', en='Utilitarian'),
    'altruistic': LocalizedText(fr='Altruiste', en='Altruistic'),
    'individual': LocalizedText(fr='Individualiste', en='Individualistic'),
    'traditional': LocalizedText(fr='Traditionnel', en='Traditional'),
}

VALUES_BIPOLAR_AXES = [
    {'id': 'knowledge-vs-return', 'left': 'cognitive', 'right': 'utilitarian'},
    {'id': 'harmony-vs-order', 'left': 'aesthetic', 'right': 'traditional'},
    {'id': 'self-vs-others', 'left': 'individual', 'right': 'altruistic'},
]
