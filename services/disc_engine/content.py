# services/disc_engine/content.py
# Narrative content bank for the report. Each item carries bilingual text, a
# score predicate deciding whether it applies and a priority used to order
# the matching items.

import logging
from typing import Any, Callable, Dict, List, NamedTuple, Sequence

from .definitions import ARCHETYPES_BY_ID
from .models import LocalizedText, Locale, Scores

logger = logging.getLogger(__name__)


class ContentItem(NamedTuple):
    fr: str
    en: str
    condition: Callable[[Scores], bool]
    priority: Callable[[Scores], float]


def _item(fr: str, en: str, condition: Callable[[Scores], bool], priority: Callable[[Scores], float]) -> ContentItem:
    return ContentItem(fr=fr, en=en, condition=condition, priority=priority)

# --- Score Predicates ---

def high(score: int) -> bool:
    return score > 60

def very_high(score: int) -> bool:
    return score > 75

def moderate(score: int) -> bool:
    return 35 <= score <= 65

def low(score: int) -> bool:
    return score < 40

def very_low(score: int) -> bool:
    return score < 25


def select_items(items: Sequence[ContentItem], scores: Scores, locale: Locale, limit: int) -> List[str]:
    """Keeps the items whose condition holds, highest priority first, capped at `limit`."""
    matching = [item for item in items if item.condition(scores)]
    # Stable sort: equal priorities keep bank order
    matching.sort(key=lambda item: item.priority(scores), reverse=True)
    return [getattr(item, locale) for item in matching[:limit]]

# --- Talents ---

TALENTS = [
    # D talents
    _item('Sait prendre des décisions rapidement et avec assurance', 'Makes decisions quickly and confidently', lambda s: high(s.D), lambda s: s.D),
    _item('Mène les projets avec détermination et énergie', 'Drives projects with determination and energy', lambda s: high(s.D), lambda s: s.D),
    _item('Sait dire non et poser des limites claires', 'Can say no and set clear boundaries', lambda s: high(s.D), lambda s: s.D - 5),
    _item('Excelle dans la gestion de crise et l\'urgence', 'Excels in crisis management and urgency', lambda s: high(s.D), lambda s: s.D - 2),
    _item('Obtient des résultats concrets et mesurables', 'Achieves concrete and measurable results', lambda s: high(s.D), lambda s: s.D - 3),
    _item('Transforme les obstacles en défis motivants', 'Turns obstacles into motivating challenges', lambda s: very_high(s.D), lambda s: s.D - 1),
    _item('Impulse le mouvement et l\'action au sein de l\'équipe', 'Drives momentum and action within the team', lambda s: high(s.D) and not low(s.I), lambda s: s.D - 4),

    # I talents
    _item('Communique avec aisance et enthousiasme', 'Communicates with ease and enthusiasm', lambda s: high(s.I), lambda s: s.I),
    _item('Sait motiver et fédérer une équipe autour d\'un projet', 'Motivates and unites a team around a project', lambda s: high(s.I), lambda s: s.I - 1),
    _item('Crée facilement des relations et un réseau de contacts', 'Easily builds relationships and a contact network', lambda s: high(s.I), lambda s: s.I - 2),
    _item('Apporte créativité et idées nouvelles', 'Brings creativity and new ideas', lambda s: high(s.I), lambda s: s.I - 3),
    _item('Diffuse une énergie positive et un optimisme contagieux', 'Spreads positive energy and contagious optimism', lambda s: high(s.I), lambda s: s.I - 4),
    _item('Sait présenter et vendre les idées avec conviction', 'Presents and sells ideas with conviction', lambda s: very_high(s.I), lambda s: s.I - 1),
    _item('Favorise un climat de travail agréable et stimulant', 'Fosters a pleasant and stimulating work climate', lambda s: high(s.I) and not low(s.S), lambda s: s.I - 5),

    # S talents
    _item('Est fiable et constant dans ses engagements', 'Is reliable and consistent in commitments', lambda s: high(s.S), lambda s: s.S),
    _item('Possède une écoute active et une empathie naturelle', 'Has active listening skills and natural empathy', lambda s: high(s.S), lambda s: s.S - 1),
    _item('Fait preuve de patience et de persévérance', 'Shows patience and perseverance', lambda s: high(s.S), lambda s: s.S - 2),
    _item('Crée un environnement stable et rassurant', 'Creates a stable and reassuring environment', lambda s: high(s.S), lambda s: s.S - 3),
    _item('Accompagne les membres de l\'équipe avec bienveillance', 'Supports team members with kindness', lambda s: high(s.S), lambda s: s.S - 4),
    _item('Sait gérer les situations tendues avec calme', 'Handles tense situations with calm', lambda s: very_high(s.S), lambda s: s.S - 2),
    _item('Assure la cohésion et l\'harmonie du groupe', 'Ensures group cohesion and harmony', lambda s: high(s.S) and not low(s.I), lambda s: s.S - 5),

    # C talents
    _item('Sait analyser les problèmes pour les résoudre', 'Analyzes problems to solve them', lambda s: high(s.C), lambda s: s.C),
    _item('Est ordonné, précis et méthodique', 'Is organized, precise, and methodical', lambda s: high(s.C), lambda s: s.C - 1),
    _item('Garantit la qualité et le respect des standards', 'Guarantees quality and standards compliance', lambda s: high(s.C), lambda s: s.C - 2),
    _item('Prend des décisions basées sur des faits et des données', 'Makes decisions based on facts and data', lambda s: high(s.C), lambda s: s.C - 3),
    _item('Structure les processus et les méthodes de travail', 'Structures processes and work methods', lambda s: high(s.C), lambda s: s.C - 4),
    _item('Identifie les risques et les anticipe avec rigueur', 'Identifies and anticipates risks rigorously', lambda s: very_high(s.C), lambda s: s.C - 1),
    _item('Apporte objectivité et esprit critique aux discussions', 'Brings objectivity and critical thinking to discussions', lambda s: high(s.C) and not low(s.D), lambda s: s.C - 5),

    # Combined talents
    _item('Allie leadership et rigueur pour piloter des projets complexes', 'Combines leadership and rigor to manage complex projects', lambda s: high(s.D) and high(s.C), lambda s: (s.D + s.C) / 2),
    _item('Sait convaincre tout en restant à l\'écoute des besoins', 'Convinces while remaining attentive to needs', lambda s: high(s.I) and high(s.S), lambda s: (s.I + s.S) / 2),
    _item('Concilie ambition et attention aux personnes', 'Balances ambition with attention to people', lambda s: high(s.D) and high(s.I), lambda s: (s.D + s.I) / 2),
    _item('Apporte méthode et stabilité aux projets d\'équipe', 'Brings method and stability to team projects', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2),
    _item('Sait tempérer l\'action par la réflexion et l\'analyse', 'Tempers action with reflection and analysis', lambda s: moderate(s.D) and high(s.C), lambda s: s.C - 8),
    _item('Construit des relations durables fondées sur la confiance', 'Builds lasting relationships based on trust', lambda s: high(s.S) and not very_low(s.I), lambda s: s.S - 6),
    _item('Maintient le cap même sous pression', 'Stays the course even under pressure', lambda s: high(s.D) and high(s.S), lambda s: (s.D + s.S) / 2 - 5),
    _item('Est capable d\'écouter avant de décider', 'Listens before making decisions', lambda s: high(s.S) and moderate(s.D), lambda s: s.S - 7),
    _item('Favorise l\'innovation par sa créativité et son ouverture', 'Fosters innovation through creativity and openness', lambda s: high(s.I) and not high(s.C), lambda s: s.I - 6),
    _item('Produit un travail d\'une fiabilité exemplaire', 'Produces work of exemplary reliability', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 3),
    _item('Communique de façon claire et structurée', 'Communicates clearly and in a structured way', lambda s: high(s.C) and moderate(s.I), lambda s: s.C - 6),

    # Moderate/balanced talents
    _item('Fait preuve d\'adaptabilité dans différents contextes', 'Shows adaptability in different contexts', lambda s: moderate(s.D) and moderate(s.I) and moderate(s.S) and moderate(s.C), lambda s: 40),
    _item('Sait équilibrer action et réflexion selon le contexte', 'Balances action and reflection based on context', lambda s: moderate(s.D) and moderate(s.C), lambda s: 38),
    _item('Possède une vision équilibrée entre résultats et relations', 'Has a balanced view between results and relationships', lambda s: moderate(s.D) and moderate(s.I), lambda s: 36),

    # More D talents
    _item('Prend les initiatives sans attendre les consignes', 'Takes initiative without waiting for instructions', lambda s: very_high(s.D), lambda s: s.D - 6),
    _item('Fixe des objectifs ambitieux et les atteint', 'Sets ambitious goals and achieves them', lambda s: high(s.D) and not low(s.C), lambda s: s.D - 7),

    # More I talents
    _item('Détend l\'atmosphère et désamorce les tensions', 'Lightens the mood and defuses tensions', lambda s: high(s.I) and high(s.S), lambda s: (s.I + s.S) / 2 - 6),
    _item('Sait adapter son discours à son interlocuteur', 'Adapts communication to the audience', lambda s: high(s.I) and moderate(s.S), lambda s: s.I - 7),

    # More S talents
    _item('Constitue le pilier silencieux de l\'équipe', 'Is the quiet backbone of the team', lambda s: very_high(s.S) and low(s.D), lambda s: s.S - 8),
    _item('Sait mettre les autres en confiance', 'Puts others at ease', lambda s: high(s.S) and moderate(s.I), lambda s: s.S - 9),

    # More C talents
    _item('Documente et formalise les bonnes pratiques', 'Documents and formalizes best practices', lambda s: very_high(s.C), lambda s: s.C - 7),
    _item('Repère les incohérences et les failles dans un raisonnement', 'Spots inconsistencies and flaws in reasoning', lambda s: very_high(s.C) and not low(s.D), lambda s: s.C - 8),

    # Universal fallbacks (always match, low priority)
    _item('Sait s\'adapter aux situations variées', 'Adapts to varied situations', lambda s: True, lambda s: 10),
    _item('Apporte un regard personnel et unique aux projets', 'Brings a personal and unique perspective to projects', lambda s: True, lambda s: 9),
    _item('Contribue positivement à la dynamique d\'équipe', 'Contributes positively to team dynamics', lambda s: True, lambda s: 8),
    _item('Sait tirer parti de ses expériences passées', 'Leverages past experiences effectively', lambda s: True, lambda s: 7),
    _item('Fait preuve de bonne volonté et d\'engagement', 'Shows goodwill and commitment', lambda s: True, lambda s: 6),
    _item('Sait identifier ses forces et les mettre au service de l\'équipe', 'Identifies strengths and puts them at the service of the team', lambda s: True, lambda s: 5),
    _item('Est capable de progresser rapidement quand on lui fait confiance', 'Progresses quickly when trusted', lambda s: True, lambda s: 4),
    _item('Apporte une contribution fiable au quotidien', 'Provides reliable daily contributions', lambda s: True, lambda s: 3),
]

# --- Environment ---

ENVIRONMENT = [
    # D environment
    _item('Un environnement où l\'autonomie et l\'initiative sont valorisées', 'An environment where autonomy and initiative are valued', lambda s: high(s.D), lambda s: s.D),
    _item('Des défis réguliers et des objectifs ambitieux à atteindre', 'Regular challenges and ambitious goals to achieve', lambda s: high(s.D), lambda s: s.D - 1),
    _item('Une culture de la performance et des résultats', 'A culture of performance and results', lambda s: high(s.D), lambda s: s.D - 2),
    _item('La possibilité de prendre des décisions et d\'agir rapidement', 'The ability to make decisions and act quickly', lambda s: high(s.D), lambda s: s.D - 3),
    _item('Un minimum de bureaucratie et de lourdeur administrative', 'Minimal bureaucracy and administrative burden', lambda s: high(s.D) and low(s.C), lambda s: s.D - 4),

    # I environment
    _item('Un cadre de travail collaboratif et convivial', 'A collaborative and friendly work setting', lambda s: high(s.I), lambda s: s.I),
    _item('Des interactions fréquentes avec les collègues et partenaires', 'Frequent interactions with colleagues and partners', lambda s: high(s.I), lambda s: s.I - 1),
    _item('De la variété dans les tâches et les projets', 'Variety in tasks and projects', lambda s: high(s.I), lambda s: s.I - 2),
    _item('La possibilité d\'exprimer sa créativité et ses idées', 'The opportunity to express creativity and ideas', lambda s: high(s.I), lambda s: s.I - 3),
    _item('Une reconnaissance visible des contributions et des succès', 'Visible recognition of contributions and successes', lambda s: high(s.I), lambda s: s.I - 4),

    # S environment
    _item('Un environnement de travail stable et prévisible', 'A stable and predictable work environment', lambda s: high(s.S), lambda s: s.S),
    _item('Des relations de confiance au sein de l\'équipe', 'Trusting relationships within the team', lambda s: high(s.S), lambda s: s.S - 1),
    _item('Du temps suffisant pour accomplir les tâches correctement', 'Sufficient time to complete tasks properly', lambda s: high(s.S), lambda s: s.S - 2),
    _item('Un accompagnement dans les phases de changement', 'Support during periods of change', lambda s: high(s.S), lambda s: s.S - 3),
    _item('Une équipe soudée avec un esprit d\'entraide', 'A close-knit team with a spirit of mutual support', lambda s: high(s.S), lambda s: s.S - 4),

    # C environment
    _item('Des processus clairs et des règles bien définies', 'Clear processes and well-defined rules', lambda s: high(s.C), lambda s: s.C),
    _item('L\'accès à des informations fiables et complètes', 'Access to reliable and complete information', lambda s: high(s.C), lambda s: s.C - 1),
    _item('Un cadre qui valorise la qualité plutôt que la quantité', 'A framework that values quality over quantity', lambda s: high(s.C), lambda s: s.C - 2),
    _item('Du temps pour analyser et réfléchir avant de décider', 'Time to analyze and think before deciding', lambda s: high(s.C), lambda s: s.C - 3),
    _item('Un environnement qui respecte les standards et la rigueur', 'An environment that respects standards and rigor', lambda s: high(s.C), lambda s: s.C - 4),

    # Combined
    _item('Un équilibre entre travail en autonomie et moments d\'équipe', 'A balance between autonomous work and team moments', lambda s: moderate(s.I) and moderate(s.S), lambda s: 40),
    _item('Des objectifs clairs avec la liberté de choisir comment les atteindre', 'Clear goals with freedom to choose how to achieve them', lambda s: high(s.D) and high(s.C), lambda s: (s.D + s.C) / 2),
    _item('Un management qui donne du sens et une vision', 'Management that provides meaning and vision', lambda s: high(s.I) and moderate(s.D), lambda s: s.I - 5),
    _item('La possibilité de progresser et d\'évoluer dans son rôle', 'The opportunity to grow and evolve in the role', lambda s: high(s.D) or high(s.I), lambda s: max(s.D, s.I) - 6),
    _item('Un cadre calme et ordonné pour se concentrer', 'A calm and organized setting to focus', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 2),
    _item('Des feedbacks réguliers et constructifs', 'Regular and constructive feedback', lambda s: high(s.S) or high(s.C), lambda s: max(s.S, s.C) - 6),
    _item('Un rythme de travail soutenu mais avec des temps de récupération', 'A sustained work pace with recovery time', lambda s: high(s.D) and high(s.S), lambda s: (s.D + s.S) / 2 - 5),
    _item('Une culture qui encourage l\'apprentissage continu', 'A culture that encourages continuous learning', lambda s: high(s.C) and not very_low(s.I), lambda s: s.C - 6),
    _item('Des réunions efficaces et bien structurées', 'Efficient and well-structured meetings', lambda s: high(s.C) and not high(s.I), lambda s: s.C - 7),
    _item('La possibilité de travailler avec des experts dans leur domaine', 'The opportunity to work with domain experts', lambda s: high(s.C) and moderate(s.I), lambda s: s.C - 8),
    _item('Un environnement où les conflits sont gérés avec diplomatie', 'An environment where conflicts are handled diplomatically', lambda s: high(s.S) and low(s.D), lambda s: s.S - 5),
    _item('Des projets stimulants avec un impact visible', 'Stimulating projects with visible impact', lambda s: high(s.D) and high(s.I), lambda s: (s.D + s.I) / 2 - 3),
    _item('Un espace de travail organisé et fonctionnel', 'An organized and functional workspace', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 4),
    _item('La liberté d\'organiser son emploi du temps', 'Freedom to organize one\'s own schedule', lambda s: high(s.D) and not high(s.C), lambda s: s.D - 5),
    _item('Un climat de bienveillance et de respect mutuel', 'An atmosphere of kindness and mutual respect', lambda s: high(s.S) and high(s.I), lambda s: (s.S + s.I) / 2 - 3),

    # Moderate/balanced
    _item('Un environnement flexible qui s\'adapte aux besoins de chacun', 'A flexible environment that adapts to individual needs', lambda s: moderate(s.D) and moderate(s.S), lambda s: 35),
    _item('Un mélange de travail individuel et de projets collaboratifs', 'A mix of individual work and collaborative projects', lambda s: moderate(s.I) and moderate(s.C), lambda s: 34),
    _item('Des responsabilités clairement définies', 'Clearly defined responsibilities', lambda s: high(s.C) or high(s.S), lambda s: max(s.C, s.S) - 7),
    _item('Un management accessible et à l\'écoute', 'Accessible and attentive management', lambda s: high(s.S) and not high(s.D), lambda s: s.S - 6),
    _item('La possibilité de prendre du recul et de planifier', 'The opportunity to step back and plan', lambda s: high(s.C) and not very_high(s.D), lambda s: s.C - 9),

    # Universal fallbacks
    _item('Un environnement de travail respectueux et professionnel', 'A respectful and professional work environment', lambda s: True, lambda s: 10),
    _item('Des objectifs clairs et un cadre bien défini', 'Clear objectives and a well-defined framework', lambda s: True, lambda s: 9),
    _item('Un bon équilibre entre travail individuel et collectif', 'A good balance between individual and collective work', lambda s: True, lambda s: 8),
    _item('Des opportunités d\'apprentissage et de développement', 'Learning and development opportunities', lambda s: True, lambda s: 7),
    _item('Une communication transparente au sein de l\'équipe', 'Transparent communication within the team', lambda s: True, lambda s: 6),
    _item('Un management qui reconnaît les contributions individuelles', 'Management that recognizes individual contributions', lambda s: True, lambda s: 5),
    _item('La possibilité de contribuer de manière significative', 'The ability to contribute meaningfully', lambda s: True, lambda s: 4),
    _item('Un rythme de travail soutenable sur la durée', 'A sustainable work pace over time', lambda s: True, lambda s: 3),
]

# --- Communication Do ---

COMMUNICATION_DO = [
    # D do
    _item('Allez droit au but, soyez concis et direct', 'Get straight to the point, be concise and direct', lambda s: high(s.D), lambda s: s.D),
    _item('Présentez les résultats attendus plutôt que les détails du processus', 'Present expected results rather than process details', lambda s: high(s.D), lambda s: s.D - 1),
    _item('Proposez des options avec les avantages de chacune', 'Offer options with the benefits of each', lambda s: high(s.D), lambda s: s.D - 2),
    _item('Respectez son besoin d\'autonomie et de contrôle', 'Respect their need for autonomy and control', lambda s: high(s.D), lambda s: s.D - 3),
    _item('Montrez que vous êtes orienté action et solutions', 'Show that you are action and solution-oriented', lambda s: high(s.D), lambda s: s.D - 4),
    _item('Soyez factuel et précis dans vos arguments', 'Be factual and precise in your arguments', lambda s: high(s.D) and high(s.C), lambda s: (s.D + s.C) / 2 - 2),

    # I do
    _item('Soyez chaleureux et expressif dans vos échanges', 'Be warm and expressive in exchanges', lambda s: high(s.I), lambda s: s.I),
    _item('Laissez-lui du temps pour s\'exprimer et partager ses idées', 'Give them time to express and share ideas', lambda s: high(s.I), lambda s: s.I - 1),
    _item('Valorisez ses idées et son enthousiasme', 'Value their ideas and enthusiasm', lambda s: high(s.I), lambda s: s.I - 2),
    _item('Utilisez l\'humour et la convivialité', 'Use humor and friendliness', lambda s: high(s.I), lambda s: s.I - 3),
    _item('Proposez des brainstormings et échanges informels', 'Suggest brainstorming and informal discussions', lambda s: high(s.I), lambda s: s.I - 4),
    _item('Reconnaissez publiquement ses contributions', 'Publicly acknowledge their contributions', lambda s: high(s.I) and not high(s.C), lambda s: s.I - 5),

    # S do
    _item('Soyez patient et rassurant dans vos échanges', 'Be patient and reassuring in exchanges', lambda s: high(s.S), lambda s: s.S),
    _item('Prévenez des changements suffisamment à l\'avance', 'Warn about changes well in advance', lambda s: high(s.S), lambda s: s.S - 1),
    _item('Demandez son avis sincèrement et écoutez sa réponse', 'Ask for their opinion sincerely and listen', lambda s: high(s.S), lambda s: s.S - 2),
    _item('Montrez de la reconnaissance pour sa fiabilité et sa constance', 'Show appreciation for their reliability and consistency', lambda s: high(s.S), lambda s: s.S - 3),
    _item('Offrez un cadre sécurisant avec des repères clairs', 'Provide a reassuring framework with clear guidelines', lambda s: high(s.S), lambda s: s.S - 4),
    _item('Donnez-lui le temps de traiter l\'information', 'Give them time to process information', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2 - 2),

    # C do
    _item('Soyez précis, factuel et bien préparé', 'Be precise, factual, and well-prepared', lambda s: high(s.C), lambda s: s.C),
    _item('Appuyez vos arguments sur des données et des preuves', 'Support arguments with data and evidence', lambda s: high(s.C), lambda s: s.C - 1),
    _item('Donnez-lui du temps pour analyser et réfléchir', 'Give them time to analyze and reflect', lambda s: high(s.C), lambda s: s.C - 2),
    _item('Respectez son besoin de structure et de clarté', 'Respect their need for structure and clarity', lambda s: high(s.C), lambda s: s.C - 3),
    _item('Fournissez les détails et les informations complètes', 'Provide details and complete information', lambda s: high(s.C), lambda s: s.C - 4),
    _item('Respectez les processus et les protocoles établis', 'Respect established processes and protocols', lambda s: high(s.C) and not high(s.D), lambda s: s.C - 5),

    # Combined do
    _item('Combinez rigueur des faits et dynamisme de la présentation', 'Combine factual rigor with dynamic presentation', lambda s: high(s.C) and high(s.I), lambda s: (s.C + s.I) / 2 - 3),
    _item('Soyez direct mais attentif à ses réactions', 'Be direct but attentive to their reactions', lambda s: high(s.D) and high(s.S), lambda s: (s.D + s.S) / 2 - 3),
    _item('Donnez une vision d\'ensemble puis les détails si demandé', 'Give an overview then details if requested', lambda s: high(s.D) and moderate(s.C), lambda s: s.D - 6),
    _item('Créez un espace de dialogue ouvert et sans jugement', 'Create an open, judgment-free dialogue space', lambda s: high(s.S) and high(s.I), lambda s: (s.S + s.I) / 2 - 3),
    _item('Présentez un plan d\'action clair avec des échéances', 'Present a clear action plan with deadlines', lambda s: high(s.D) and high(s.C), lambda s: (s.D + s.C) / 2 - 4),
    _item('Sollicitez son expertise et ses connaissances', 'Seek out their expertise and knowledge', lambda s: high(s.C) and not low(s.I), lambda s: s.C - 6),
    _item('Commencez par les points d\'accord avant les divergences', 'Start with points of agreement before differences', lambda s: high(s.S) and not high(s.D), lambda s: s.S - 5),
    _item('Montrez de l\'intérêt pour la personne, pas seulement le travail', 'Show interest in the person, not just the work', lambda s: high(s.I) and high(s.S), lambda s: (s.I + s.S) / 2 - 4),

    # Moderate
    _item('Adaptez votre rythme au sien — ni trop rapide, ni trop lent', 'Match their pace — not too fast, not too slow', lambda s: moderate(s.D) and moderate(s.S), lambda s: 35),
    _item('Mélangez éléments factuels et relationnels dans vos échanges', 'Mix factual and relational elements in exchanges', lambda s: moderate(s.C) and moderate(s.I), lambda s: 34),
    _item('Soyez cohérent et fiable dans vos engagements', 'Be consistent and reliable in your commitments', lambda s: high(s.S) or high(s.C), lambda s: max(s.S, s.C) - 7),
    _item('Posez des questions ouvertes pour mieux comprendre ses besoins', 'Ask open questions to better understand their needs', lambda s: high(s.S) and moderate(s.I), lambda s: s.S - 6),
    _item('Tenez vos promesses et respectez les délais annoncés', 'Keep your promises and respect announced deadlines', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 5),

    # Universal fallbacks
    _item('Soyez clair et transparent dans vos intentions', 'Be clear and transparent about your intentions', lambda s: True, lambda s: 10),
    _item('Écoutez activement avant de répondre', 'Listen actively before responding', lambda s: True, lambda s: 9),
    _item('Montrez du respect pour son point de vue', 'Show respect for their perspective', lambda s: True, lambda s: 8),
    _item('Exprimez vos attentes de façon explicite', 'Express your expectations explicitly', lambda s: True, lambda s: 7),
    _item('Soyez authentique et sincère dans vos échanges', 'Be authentic and sincere in your exchanges', lambda s: True, lambda s: 6),
    _item('Adaptez votre rythme et votre ton à la situation', 'Adapt your pace and tone to the situation', lambda s: True, lambda s: 5),
    _item('Privilégiez le dialogue constructif', 'Favor constructive dialogue', lambda s: True, lambda s: 4),
    _item('Reconnaissez ses efforts et ses contributions', 'Acknowledge their efforts and contributions', lambda s: True, lambda s: 3),
]

# --- Communication Don't ---

COMMUNICATION_DONT = [
    # D don't
    _item('Ne perdez pas de temps en bavardages inutiles', 'Don\'t waste time on unnecessary small talk', lambda s: high(s.D), lambda s: s.D),
    _item('Ne lui imposez pas de contraintes sans explication', 'Don\'t impose constraints without explanation', lambda s: high(s.D), lambda s: s.D - 1),
    _item('Ne remettez pas en question son autorité devant les autres', 'Don\'t question their authority in front of others', lambda s: high(s.D), lambda s: s.D - 2),
    _item('Ne soyez pas trop détaillé ou trop lent dans vos explications', 'Don\'t be too detailed or slow in explanations', lambda s: high(s.D), lambda s: s.D - 3),
    _item('Ne cherchez pas à le contrôler ou à micro-manager', 'Don\'t try to control or micromanage them', lambda s: high(s.D), lambda s: s.D - 4),

    # I don't
    _item('Ne soyez pas trop froid ou impersonnel', 'Don\'t be too cold or impersonal', lambda s: high(s.I), lambda s: s.I),
    _item('Ne coupez pas ses élans d\'enthousiasme brutalement', 'Don\'t abruptly cut off their enthusiasm', lambda s: high(s.I), lambda s: s.I - 1),
    _item('Ne lui imposez pas des tâches trop solitaires ou répétitives', 'Don\'t assign them too many solitary or repetitive tasks', lambda s: high(s.I), lambda s: s.I - 2),
    _item('Ne négligez pas la dimension relationnelle des échanges', 'Don\'t neglect the relational dimension of exchanges', lambda s: high(s.I), lambda s: s.I - 3),
    _item('Ne le laissez pas dans l\'ombre — il a besoin de visibilité', 'Don\'t leave them in the shadows — they need visibility', lambda s: high(s.I), lambda s: s.I - 4),

    # S don't
    _item('Ne le mettez pas sous pression avec des délais irréalistes', 'Don\'t put them under pressure with unrealistic deadlines', lambda s: high(s.S), lambda s: s.S),
    _item('Ne changez pas les plans sans prévenir ni expliquer', 'Don\'t change plans without notice or explanation', lambda s: high(s.S), lambda s: s.S - 1),
    _item('Ne le brusquez pas et ne l\'interrompez pas', 'Don\'t rush or interrupt them', lambda s: high(s.S), lambda s: s.S - 2),
    _item('Ne prenez pas son silence pour de l\'accord — vérifiez', 'Don\'t take their silence as agreement — check', lambda s: high(s.S), lambda s: s.S - 3),
    _item('Ne le confrontez pas de manière agressive', 'Don\'t confront them aggressively', lambda s: high(s.S), lambda s: s.S - 4),

    # C don't
    _item('Ne soyez pas approximatif ou imprécis dans vos demandes', 'Don\'t be vague or imprecise in your requests', lambda s: high(s.C), lambda s: s.C),
    _item('Ne lui demandez pas de décider sans lui donner les données', 'Don\'t ask them to decide without providing data', lambda s: high(s.C), lambda s: s.C - 1),
    _item('Ne critiquez pas la qualité de son travail sans preuves', 'Don\'t criticize their work quality without evidence', lambda s: high(s.C), lambda s: s.C - 2),
    _item('Ne bouleversez pas les processus établis sans justification', 'Don\'t disrupt established processes without justification', lambda s: high(s.C), lambda s: s.C - 3),
    _item('Ne le forcez pas à improviser ou à décider dans l\'urgence', 'Don\'t force them to improvise or decide under pressure', lambda s: high(s.C), lambda s: s.C - 4),

    # Combined don't
    _item('Ne confondez pas rapidité et précipitation dans vos demandes', 'Don\'t confuse speed with haste in your requests', lambda s: high(s.D) and high(s.C), lambda s: (s.D + s.C) / 2 - 2),
    _item('Ne négligez ni les faits ni les sentiments', 'Don\'t neglect either facts or feelings', lambda s: moderate(s.C) and moderate(s.I), lambda s: 35),
    _item('N\'ignorez pas ses signaux de mal-être ou de surcharge', 'Don\'t ignore their signs of discomfort or overload', lambda s: high(s.S) and low(s.D), lambda s: s.S - 5),
    _item('Ne le laissez pas dans l\'incertitude sur les prochaines étapes', 'Don\'t leave them uncertain about next steps', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2 - 3),
    _item('Ne monopolisez pas la parole lors des échanges', 'Don\'t monopolize the conversation during exchanges', lambda s: high(s.S) and high(s.I), lambda s: s.S - 6),
    _item('Ne promettez pas sans être sûr de pouvoir tenir', 'Don\'t promise unless you\'re sure you can deliver', lambda s: high(s.S) or high(s.C), lambda s: max(s.S, s.C) - 6),
    _item('Ne minimisez pas ses préoccupations ou ses questions', 'Don\'t minimize their concerns or questions', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 4),
    _item('Ne l\'exposez pas publiquement sans son accord', 'Don\'t expose them publicly without their consent', lambda s: high(s.C) and low(s.I), lambda s: s.C - 5),
    _item('Ne répondez pas à ses questions par des généralités', 'Don\'t answer their questions with generalities', lambda s: high(s.C) and not low(s.D), lambda s: s.C - 6),
    _item('Ne changez pas de direction sans prévenir et expliquer pourquoi', 'Don\'t change direction without notice and explanation', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2 - 5),

    # More don't
    _item('Ne traitez pas ses émotions comme un obstacle', 'Don\'t treat their emotions as an obstacle', lambda s: high(s.I) and high(s.S), lambda s: (s.I + s.S) / 2 - 5),
    _item('Ne le mettez pas en compétition s\'il ne le souhaite pas', 'Don\'t put them in competition if they don\'t want it', lambda s: high(s.S) and low(s.D), lambda s: s.S - 7),
    _item('Évitez le flou et l\'ambiguïté dans vos consignes', 'Avoid vagueness and ambiguity in your instructions', lambda s: high(s.C), lambda s: s.C - 7),
    _item('Ne sous-estimez pas l\'importance qu\'il accorde aux détails', 'Don\'t underestimate the importance they place on details', lambda s: very_high(s.C), lambda s: s.C - 3),
    _item('Ne rejetez pas ses idées sans les avoir considérées', 'Don\'t dismiss their ideas without considering them', lambda s: high(s.I) and not low(s.C), lambda s: s.I - 6),
    _item('Évitez de lui donner des ordres — préférez les suggestions', 'Avoid giving orders — prefer suggestions', lambda s: high(s.D) and moderate(s.S), lambda s: s.D - 5),
    _item('Ne faites pas de promesses que vous ne pourrez pas tenir', 'Don\'t make promises you can\'t keep', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2 - 6),

    # Universal fallbacks
    _item('Ne faites pas de suppositions sur ses intentions', 'Don\'t make assumptions about their intentions', lambda s: True, lambda s: 10),
    _item('Ne le jugez pas trop rapidement', 'Don\'t judge them too quickly', lambda s: True, lambda s: 9),
    _item('Ne manquez pas de respect envers son travail', 'Don\'t disrespect their work', lambda s: True, lambda s: 8),
    _item('N\'ignorez pas ses besoins au profit des vôtres', 'Don\'t ignore their needs in favor of yours', lambda s: True, lambda s: 7),
    _item('Ne communiquez pas uniquement par écrit pour les sujets importants', 'Don\'t communicate only in writing for important topics', lambda s: True, lambda s: 6),
    _item('Évitez les messages contradictoires', 'Avoid contradictory messages', lambda s: True, lambda s: 5),
    _item('Ne remettez pas en cause sa compétence sans fondement', 'Don\'t question their competence without grounds', lambda s: True, lambda s: 4),
    _item('Évitez de reporter indéfiniment les décisions', 'Avoid postponing decisions indefinitely', lambda s: True, lambda s: 3),
]

# --- Motivation Keys ---

MOTIVATION_KEYS = [
    # D motivation
    _item('Atteindre des objectifs ambitieux et mesurables', 'Achieving ambitious and measurable goals', lambda s: high(s.D), lambda s: s.D),
    _item('Avoir du pouvoir de décision et de l\'autonomie', 'Having decision-making power and autonomy', lambda s: high(s.D), lambda s: s.D - 1),
    _item('Relever des défis et repousser ses limites', 'Taking on challenges and pushing boundaries', lambda s: high(s.D), lambda s: s.D - 2),
    _item('Voir des résultats concrets et rapides', 'Seeing concrete and fast results', lambda s: high(s.D), lambda s: s.D - 3),
    _item('Être reconnu pour ses compétences et ses réalisations', 'Being recognized for skills and achievements', lambda s: high(s.D), lambda s: s.D - 4),
    _item('Avoir la possibilité de diriger et d\'influencer', 'Having the opportunity to lead and influence', lambda s: very_high(s.D), lambda s: s.D - 2),

    # I motivation
    _item('Travailler dans un environnement social et collaboratif', 'Working in a social and collaborative environment', lambda s: high(s.I), lambda s: s.I),
    _item('Être apprécié et reconnu par ses pairs', 'Being appreciated and recognized by peers', lambda s: high(s.I), lambda s: s.I - 1),
    _item('Pouvoir exprimer sa créativité librement', 'Being able to express creativity freely', lambda s: high(s.I), lambda s: s.I - 2),
    _item('Participer à des projets innovants et stimulants', 'Participating in innovative and stimulating projects', lambda s: high(s.I), lambda s: s.I - 3),
    _item('Avoir de la variété et éviter la routine', 'Having variety and avoiding routine', lambda s: high(s.I), lambda s: s.I - 4),
    _item('Inspirer et influencer positivement les autres', 'Inspiring and positively influencing others', lambda s: very_high(s.I), lambda s: s.I - 2),

    # S motivation
    _item('Évoluer dans un cadre stable et sécurisant', 'Evolving in a stable and secure framework', lambda s: high(s.S), lambda s: s.S),
    _item('Contribuer au bien-être et à l\'harmonie de l\'équipe', 'Contributing to team well-being and harmony', lambda s: high(s.S), lambda s: s.S - 1),
    _item('Se sentir utile et apprécié pour sa fiabilité', 'Feeling useful and appreciated for reliability', lambda s: high(s.S), lambda s: s.S - 2),
    _item('Avoir des relations de confiance avec ses collègues', 'Having trusting relationships with colleagues', lambda s: high(s.S), lambda s: s.S - 3),
    _item('Accompagner et aider les autres à progresser', 'Supporting and helping others grow', lambda s: high(s.S), lambda s: s.S - 4),
    _item('Travailler à un rythme qui permet la qualité', 'Working at a pace that allows quality', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2 - 2),

    # C motivation
    _item('Comprendre en profondeur les sujets sur lesquels on travaille', 'Deeply understanding the subjects one works on', lambda s: high(s.C), lambda s: s.C),
    _item('Produire un travail de haute qualité et sans erreur', 'Producing high-quality, error-free work', lambda s: high(s.C), lambda s: s.C - 1),
    _item('Disposer de toutes les informations nécessaires', 'Having all necessary information available', lambda s: high(s.C), lambda s: s.C - 2),
    _item('Travailler dans un cadre structuré avec des règles claires', 'Working in a structured framework with clear rules', lambda s: high(s.C), lambda s: s.C - 3),
    _item('Être reconnu pour son expertise et sa rigueur', 'Being recognized for expertise and rigor', lambda s: high(s.C), lambda s: s.C - 4),
    _item('Résoudre des problèmes complexes avec méthode', 'Solving complex problems methodically', lambda s: very_high(s.C), lambda s: s.C - 2),

    # Combined motivation
    _item('Allier performance individuelle et réussite collective', 'Combining individual performance and collective success', lambda s: high(s.D) and high(s.I), lambda s: (s.D + s.I) / 2 - 3),
    _item('Construire quelque chose de durable et de qualité', 'Building something lasting and of quality', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2 - 2),
    _item('Avoir un impact concret sur son environnement', 'Having a concrete impact on one\'s environment', lambda s: high(s.D) and not low(s.I), lambda s: s.D - 5),
    _item('Faire partie d\'une équipe qui se soutient mutuellement', 'Being part of a team that supports each other', lambda s: high(s.S) and high(s.I), lambda s: (s.S + s.I) / 2 - 3),
    _item('Apprendre continuellement et développer ses compétences', 'Continuously learning and developing skills', lambda s: high(s.C) and not low(s.I), lambda s: s.C - 5),
    _item('Voir le fruit de ses efforts et sa progression', 'Seeing the fruits of one\'s efforts and progress', lambda s: high(s.D) and high(s.S), lambda s: (s.D + s.S) / 2 - 4),
    _item('Travailler dans un environnement éthique et juste', 'Working in an ethical and fair environment', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 4),
    _item('Être encouragé à innover et proposer de nouvelles idées', 'Being encouraged to innovate and propose new ideas', lambda s: high(s.I) and moderate(s.D), lambda s: s.I - 5),
    _item('Avoir un rôle clair avec des responsabilités définies', 'Having a clear role with defined responsibilities', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 5),
    _item('Sentir que son travail a du sens et de la valeur', 'Feeling that one\'s work has meaning and value', lambda s: high(s.S) and moderate(s.C), lambda s: s.S - 5),
    _item('Pouvoir se concentrer sans interruptions fréquentes', 'Being able to focus without frequent interruptions', lambda s: high(s.C) and low(s.I), lambda s: s.C - 6),
    _item('Évoluer professionnellement et gravir les échelons', 'Growing professionally and climbing the ranks', lambda s: high(s.D) and not low(s.C), lambda s: s.D - 6),

    # Moderate
    _item('Avoir un équilibre entre vie professionnelle et personnelle', 'Having a work-life balance', lambda s: moderate(s.D) and high(s.S), lambda s: s.S - 6),
    _item('Travailler sur des sujets variés et enrichissants', 'Working on varied and enriching subjects', lambda s: moderate(s.I) and moderate(s.C), lambda s: 38),
    _item('Être traité avec respect et considération', 'Being treated with respect and consideration', lambda s: high(s.S) or high(s.C), lambda s: max(s.S, s.C) - 7),
    _item('Contribuer à des projets qui comptent vraiment', 'Contributing to projects that truly matter', lambda s: high(s.D) or high(s.S), lambda s: max(s.D, s.S) - 7),
    _item('Recevoir des feedbacks constructifs pour progresser', 'Receiving constructive feedback to improve', lambda s: high(s.C) and moderate(s.I), lambda s: s.C - 7),
    _item('Avoir confiance en sa hiérarchie et dans la direction', 'Having trust in management and leadership', lambda s: high(s.S) and not very_high(s.D), lambda s: s.S - 7),

    # Extra
    _item('Être impliqué dans les décisions importantes', 'Being involved in important decisions', lambda s: high(s.D) and moderate(s.C), lambda s: s.D - 7),
    _item('Partager ses connaissances et former les autres', 'Sharing knowledge and training others', lambda s: high(s.I) and high(s.C), lambda s: (s.I + s.C) / 2 - 4),
    _item('Se sentir en sécurité dans son poste et son rôle', 'Feeling secure in one\'s position and role', lambda s: very_high(s.S) and low(s.D), lambda s: s.S - 3),
    _item('Avoir les moyens et outils nécessaires pour bien travailler', 'Having the necessary resources and tools to work well', lambda s: high(s.C) and moderate(s.D), lambda s: s.C - 8),

    # Universal fallbacks
    _item('Sentir que son travail a du sens et contribue à quelque chose', 'Feeling that one\'s work has meaning and contributes', lambda s: True, lambda s: 10),
    _item('Être traité avec équité et respect', 'Being treated fairly and with respect', lambda s: True, lambda s: 9),
    _item('Avoir des perspectives d\'évolution claires', 'Having clear growth prospects', lambda s: True, lambda s: 8),
    _item('Travailler dans une ambiance positive et bienveillante', 'Working in a positive and supportive atmosphere', lambda s: True, lambda s: 7),
    _item('Être encouragé et soutenu dans ses efforts', 'Being encouraged and supported in one\'s efforts', lambda s: True, lambda s: 6),
    _item('Disposer d\'un cadre de travail clair et organisé', 'Having a clear and organized work framework', lambda s: True, lambda s: 5),
    _item('Pouvoir compter sur ses collègues', 'Being able to rely on colleagues', lambda s: True, lambda s: 4),
    _item('Recevoir de la reconnaissance pour ses efforts', 'Receiving recognition for one\'s efforts', lambda s: True, lambda s: 3),
]

# --- Improvement Areas ---

IMPROVEMENT_AREAS = [
    # D improvements
    _item('Développer davantage la patience et l\'écoute active', 'Develop more patience and active listening', lambda s: high(s.D) and low(s.S), lambda s: s.D),
    _item('Apprendre à déléguer et à faire confiance', 'Learn to delegate and trust others', lambda s: high(s.D), lambda s: s.D - 1),
    _item('Prendre le temps de considérer les impacts humains des décisions', 'Take time to consider the human impact of decisions', lambda s: high(s.D) and low(s.I), lambda s: s.D - 2),
    _item('Tempérer l\'impatience quand les résultats tardent', 'Temper impatience when results are slow', lambda s: high(s.D), lambda s: s.D - 3),
    _item('Accorder plus d\'attention aux détails et aux processus', 'Pay more attention to details and processes', lambda s: high(s.D) and low(s.C), lambda s: s.D - 4),
    _item('Accepter que tout le monde n\'ait pas le même rythme', 'Accept that not everyone works at the same pace', lambda s: very_high(s.D) and low(s.S), lambda s: s.D - 1),

    # I improvements
    _item('Renforcer le suivi et la rigueur dans les projets', 'Strengthen follow-through and rigor in projects', lambda s: high(s.I) and low(s.C), lambda s: s.I),
    _item('Apprendre à écouter davantage et parler moins', 'Learn to listen more and talk less', lambda s: high(s.I) and low(s.S), lambda s: s.I - 1),
    _item('Mieux gérer son temps et ses engagements', 'Better manage time and commitments', lambda s: high(s.I), lambda s: s.I - 2),
    _item('Ne pas éviter les conversations difficiles nécessaires', 'Don\'t avoid necessary difficult conversations', lambda s: high(s.I) and low(s.D), lambda s: s.I - 3),
    _item('Se concentrer sur une tâche à la fois plutôt que de se disperser', 'Focus on one task at a time rather than scattering', lambda s: high(s.I) and low(s.C), lambda s: s.I - 4),
    _item('Transformer les idées en plans d\'action concrets', 'Turn ideas into concrete action plans', lambda s: very_high(s.I) and low(s.C), lambda s: s.I - 2),

    # S improvements
    _item('Oser exprimer ses besoins et poser des limites', 'Dare to express needs and set boundaries', lambda s: high(s.S) and low(s.D), lambda s: s.S),
    _item('Accepter le changement comme une opportunité de croissance', 'Accept change as a growth opportunity', lambda s: high(s.S), lambda s: s.S - 1),
    _item('Ne pas prendre les décisions des autres personnellement', 'Don\'t take others\' decisions personally', lambda s: high(s.S), lambda s: s.S - 2),
    _item('Prendre plus d\'initiatives sans attendre la validation', 'Take more initiative without waiting for validation', lambda s: high(s.S) and low(s.D), lambda s: s.S - 3),
    _item('Exprimer les désaccords de manière constructive', 'Express disagreements constructively', lambda s: high(s.S), lambda s: s.S - 4),
    _item('Oser sortir de sa zone de confort régulièrement', 'Dare to step out of comfort zone regularly', lambda s: very_high(s.S) and low(s.D), lambda s: s.S - 1),

    # C improvements
    _item('Accepter que la perfection n\'est pas toujours nécessaire', 'Accept that perfection isn\'t always necessary', lambda s: high(s.C), lambda s: s.C),
    _item('Prendre des décisions même avec des informations incomplètes', 'Make decisions even with incomplete information', lambda s: high(s.C) and low(s.D), lambda s: s.C - 1),
    _item('Développer la dimension relationnelle au travail', 'Develop the relational dimension at work', lambda s: high(s.C) and low(s.I), lambda s: s.C - 2),
    _item('Ne pas sur-analyser au détriment de l\'action', 'Don\'t over-analyze at the expense of action', lambda s: high(s.C) and low(s.D), lambda s: s.C - 3),
    _item('Apprendre à improviser et sortir du cadre parfois', 'Learn to improvise and think outside the box sometimes', lambda s: high(s.C), lambda s: s.C - 4),
    _item('Montrer plus de chaleur et d\'expressivité dans les échanges', 'Show more warmth and expressiveness in exchanges', lambda s: very_high(s.C) and low(s.I), lambda s: s.C - 1),

    # Combined improvements
    _item('Trouver l\'équilibre entre exigence et bienveillance', 'Find the balance between standards and kindness', lambda s: high(s.D) and high(s.C) and low(s.S), lambda s: (s.D + s.C) / 2 - 3),
    _item('Canaliser son énergie vers les priorités essentielles', 'Channel energy toward essential priorities', lambda s: high(s.D) and high(s.I), lambda s: (s.D + s.I) / 2 - 4),
    _item('Communiquer les attentes plus clairement aux autres', 'Communicate expectations more clearly to others', lambda s: high(s.D) and low(s.I), lambda s: s.D - 5),
    _item('Apprendre à dire non avec diplomatie', 'Learn to say no diplomatically', lambda s: high(s.S) and high(s.I), lambda s: (s.S + s.I) / 2 - 3),
    _item('Développer la capacité à gérer les conflits', 'Develop the ability to manage conflicts', lambda s: high(s.S) and low(s.D), lambda s: s.S - 5),
    _item('Cultiver la souplesse face aux imprévus', 'Cultivate flexibility in the face of the unexpected', lambda s: high(s.C) and high(s.S), lambda s: (s.C + s.S) / 2 - 3),
    _item('Se rappeler que l\'erreur fait partie de l\'apprentissage', 'Remember that mistakes are part of learning', lambda s: high(s.C) and not high(s.D), lambda s: s.C - 5),
    _item('Verbaliser ses émotions plutôt que de les intérioriser', 'Verbalize emotions rather than internalize them', lambda s: high(s.S) and high(s.C), lambda s: (s.S + s.C) / 2 - 4),
    _item('Pratiquer la prise de parole en groupe', 'Practice speaking up in groups', lambda s: low(s.I) and high(s.C), lambda s: s.C - 6),
    _item('Développer la capacité à synthétiser et simplifier', 'Develop the ability to synthesize and simplify', lambda s: high(s.C) and low(s.I), lambda s: s.C - 7),
    _item('Reconnaître et célébrer les petites victoires', 'Recognize and celebrate small wins', lambda s: high(s.D) and low(s.I), lambda s: s.D - 6),

    # Moderate
    _item('Identifier plus clairement ses priorités et s\'y tenir', 'More clearly identify priorities and stick to them', lambda s: moderate(s.D) and moderate(s.C), lambda s: 38),
    _item('Travailler la communication assertive', 'Work on assertive communication', lambda s: moderate(s.D) and moderate(s.I), lambda s: 36),
    _item('Apprendre à demander de l\'aide quand nécessaire', 'Learn to ask for help when needed', lambda s: high(s.S) or (high(s.C) and low(s.I)), lambda s: max(s.S, s.C) - 8),

    # Extra
    _item('Accepter les compliments et les retours positifs', 'Accept compliments and positive feedback', lambda s: high(s.C) and low(s.I), lambda s: s.C - 8),
    _item('Prendre du recul régulièrement pour éviter le surmenage', 'Step back regularly to avoid burnout', lambda s: high(s.D) and high(s.C), lambda s: (s.D + s.C) / 2 - 5),
    _item('Ne pas se comparer systématiquement aux autres', 'Don\'t systematically compare yourself to others', lambda s: high(s.D) or high(s.C), lambda s: max(s.D, s.C) - 9),
    _item('Apprendre à prioriser l\'essentiel sur l\'urgent', 'Learn to prioritize the essential over the urgent', lambda s: high(s.D) and not high(s.C), lambda s: s.D - 7),
    _item('Cultiver la gratitude pour ce qui fonctionne bien', 'Cultivate gratitude for what works well', lambda s: high(s.C) and high(s.D), lambda s: (s.C + s.D) / 2 - 6),

    # Universal fallbacks
    _item('Développer la conscience de soi et de ses réactions sous stress', 'Develop self-awareness and stress reactions', lambda s: True, lambda s: 10),
    _item('Développer la capacité d\'adaptation à différents interlocuteurs', 'Develop adaptability to different communication styles', lambda s: True, lambda s: 9),
    _item('Apprendre à mieux gérer son énergie au quotidien', 'Learn to better manage daily energy', lambda s: True, lambda s: 8),
    _item('Pratiquer la communication assertive et bienveillante', 'Practice assertive and kind communication', lambda s: True, lambda s: 7),
    _item('Développer l\'écoute active dans les échanges', 'Develop active listening in conversations', lambda s: True, lambda s: 6),
    _item('Oser sortir de sa zone de confort de temps en temps', 'Dare to step out of one\'s comfort zone from time to time', lambda s: True, lambda s: 5),
    _item('Cultiver la patience envers soi-même et les autres', 'Cultivate patience toward oneself and others', lambda s: True, lambda s: 4),
    _item('Apprendre à célébrer les petites victoires', 'Learn to celebrate small wins', lambda s: True, lambda s: 3),
]

# --- Wheel Type Narratives ---

NARRATIVE_DESCRIPTIONS = {
    'DIRECTIF': LocalizedText(
        fr="""Vous êtes une personne résolument tournée vers l'action et les résultats. Votre style naturel est direct, affirmé et orienté vers l'objectif. Vous n'hésitez pas à prendre les rênes d'un projet et à tracer la voie pour les autres. Votre capacité à décider rapidement, même sous pression, est l'une de vos forces les plus remarquables.

Votre moteur principal est le défi : vous êtes stimulé par les obstacles et vous les percevez comme des opportunités de démontrer votre valeur. Vous avez un besoin profond d'autonomie et de contrôle, et vous êtes plus efficace lorsqu'on vous laisse la liberté de mener les choses à votre façon.

Votre communication est directe et sans détour. Vous préférez les échanges courts, efficaces et orientés solutions. Les discussions trop longues ou les processus lents peuvent être source de frustration pour vous. Votre entourage vous perçoit comme quelqu'un de déterminé, courageux et franc — mais sous pression, cette intensité peut parfois être perçue comme de l'autoritarisme ou de l'impatience.""",
        en="""You are a person resolutely focused on action and results. Your natural style is direct, assertive, and goal-oriented. You don't hesitate to take the reins of a project and blaze the trail for others. Your ability to decide quickly, even under pressure, is one of your most remarkable strengths.

Your main driver is challenge: you are energized by obstacles and see them as opportunities to demonstrate your value. You have a deep need for autonomy and control, and you are most effective when given the freedom to lead things your way.

Your communication is direct and straightforward. You prefer short, efficient, solution-oriented exchanges. Lengthy discussions or slow processes can be a source of frustration for you. Those around you perceive you as determined, courageous, and frank — but under pressure, this intensity can sometimes be perceived as authoritarian or impatient.""",
    ),
    'PROMOUVANT': LocalizedText(
        fr="""Vous combinez une énergie orientée action avec un talent naturel pour la communication et l'influence. Ce profil fait de vous un catalyseur : vous savez à la fois initier les projets et embarquer les autres dans votre vision. Votre charisme naturel et votre détermination créent une dynamique puissante.

Vous êtes stimulé par les nouveaux défis et les environnements qui vous permettent d'innover tout en obtenant des résultats concrets. Votre capacité à convaincre et à fédérer est un atout majeur : vous savez transformer une idée en mouvement collectif.

Votre communication est enthousiaste et persuasive, mais aussi directe et orientée résultats. Vous savez adapter votre discours pour motiver et engager, tout en gardant le cap sur les objectifs. Sous stress, vous pouvez avoir tendance à devenir trop directif ou à imposer votre vision sans suffisamment consulter les autres.""",
        en="""You combine action-oriented energy with a natural talent for communication and influence. This profile makes you a catalyst: you know how to both initiate projects and get others on board with your vision. Your natural charisma and determination create a powerful dynamic.

You are energized by new challenges and environments that allow you to innovate while achieving concrete results. Your ability to convince and unite people is a major asset: you can transform an idea into collective momentum.

Your communication is enthusiastic and persuasive, but also direct and results-oriented. You know how to adapt your speech to motivate and engage, while keeping the focus on objectives. Under stress, you may tend to become too directive or impose your vision without sufficiently consulting others.""",
    ),
    'EXPANSIF': LocalizedText(
        fr="""Vous êtes un communicateur né, doté d'un enthousiasme contagieux et d'un optimisme naturel. Votre énergie sociale et votre capacité à créer des liens font de vous un élément fédérateur dans toute équipe. Vous vivez pour les interactions humaines et vous tirez votre énergie des échanges avec les autres.

Votre créativité et votre ouverture d'esprit vous permettent de voir des possibilités là où d'autres voient des contraintes. Vous êtes naturellement attiré par la nouveauté, la variété et l'innovation. L'ennui et la routine sont vos plus grands ennemis.

Votre communication est chaleureuse, expressive et persuasive. Vous avez un don pour rendre les idées séduisantes et pour créer une atmosphère positive. Sous stress, votre besoin de reconnaissance peut vous pousser à vous disperser ou à promettre plus que ce que vous pouvez tenir. Vos interlocuteurs vous perçoivent généralement comme quelqu'un de dynamique et d'inspirant.""",
        en="""You are a born communicator, with contagious enthusiasm and natural optimism. Your social energy and ability to build connections make you a unifying force in any team. You thrive on human interactions and draw your energy from exchanges with others.

Your creativity and open-mindedness allow you to see possibilities where others see constraints. You are naturally drawn to novelty, variety, and innovation. Boredom and routine are your greatest enemies.

Your communication is warm, expressive, and persuasive. You have a gift for making ideas appealing and creating a positive atmosphere. Under stress, your need for recognition may lead you to spread yourself thin or promise more than you can deliver. Others generally perceive you as dynamic and inspiring.""",
    ),
    'FACILITANT': LocalizedText(
        fr="""Vous alliez un talent naturel pour les relations humaines à une profonde sensibilité aux besoins des autres. Ce profil fait de vous un facilitateur hors pair : vous savez créer les conditions pour que chacun donne le meilleur de lui-même dans un climat positif et bienveillant.

Vous êtes motivé par les interactions chaleureuses et la construction de relations durables. Votre capacité d'écoute, combinée à votre aisance sociale, vous permet de comprendre intuitivement ce qui motive vos interlocuteurs et de vous y adapter naturellement.

Votre communication est empathique, chaleureuse et inclusive. Vous cherchez naturellement le consensus et l'harmonie dans les échanges. Sous stress, vous pouvez avoir du mal à prendre des décisions impopulaires ou à affronter les conflits directement. Votre entourage vous perçoit comme quelqu'un de bienveillant, accessible et compréhensif.""",
        en="""You combine a natural talent for human relationships with a deep sensitivity to others' needs. This profile makes you an outstanding facilitator: you know how to create conditions for everyone to give their best in a positive and caring atmosphere.

You are motivated by warm interactions and building lasting relationships. Your listening ability, combined with your social ease, allows you to intuitively understand what motivates your interlocutors and adapt naturally.

Your communication is empathetic, warm, and inclusive. You naturally seek consensus and harmony in exchanges. Under stress, you may struggle to make unpopular decisions or confront conflicts directly. Those around you perceive you as kind, approachable, and understanding.""",
    ),
    'COOPERATIF': LocalizedText(
        fr="""Vous êtes le pilier silencieux sur lequel toute équipe peut compter. Votre fiabilité, votre patience et votre constance sont des qualités rares et précieuses dans un monde qui valorise souvent la vitesse et le bruit. Vous incarnez la stabilité et la loyauté.

Votre moteur est l'harmonie et la sécurité : vous donnez le meilleur de vous-même dans un environnement stable, prévisible et respectueux. Vous avez une capacité remarquable à écouter vraiment, à comprendre les autres et à les accompagner avec bienveillance.

Votre communication est calme, posée et bienveillante. Vous êtes un médiateur naturel qui sait désamorcer les tensions par votre seule présence rassurante. Sous stress, votre difficulté à dire non ou à exprimer vos frustrations peut conduire à un épuisement silencieux. Les autres vous perçoivent comme quelqu'un de fiable, patient et d'une grande qualité d'écoute.""",
        en="""You are the quiet pillar that any team can rely on. Your reliability, patience, and consistency are rare and valuable qualities in a world that often values speed and noise. You embody stability and loyalty.

Your driver is harmony and security: you perform best in a stable, predictable, and respectful environment. You have a remarkable ability to truly listen, understand others, and support them with kindness.

Your communication is calm, measured, and caring. You are a natural mediator who can defuse tensions simply through your reassuring presence. Under stress, your difficulty saying no or expressing frustrations can lead to silent exhaustion. Others perceive you as reliable, patient, and an excellent listener.""",
    ),
    'COORDONNANT': LocalizedText(
        fr="""Vous combinez la stabilité et l'écoute du profil Vert avec la rigueur et la précision du profil Bleu. Ce profil fait de vous un coordinateur exceptionnel : méthodique, fiable et attentif aux besoins de chacun. Vous êtes le garant de la qualité et de la cohésion.

Votre moteur est la recherche d'excellence dans un cadre harmonieux. Vous avez besoin de comprendre les choses en profondeur et de vous assurer que le travail est fait correctement, tout en veillant au bien-être de votre environnement. Vous prenez vos décisions de manière réfléchie, en pesant soigneusement les faits et les impacts humains.

Votre communication est posée, précise et bienveillante. Vous préférez écouter avant de parler, et quand vous vous exprimez, c'est toujours avec mesure et justesse. Sous stress, votre perfectionnisme combiné à votre résistance au changement peut vous freiner. Les autres vous perçoivent comme quelqu'un de sérieux, compétent et d'une fiabilité exemplaire.""",
        en="""You combine the stability and listening of the Green profile with the rigor and precision of the Blue profile. This profile makes you an exceptional coordinator: methodical, reliable, and attentive to everyone's needs. You are the guardian of quality and cohesion.

Your driver is the pursuit of excellence within a harmonious framework. You need to understand things deeply and ensure work is done correctly, while caring for the well-being of your environment. You make decisions thoughtfully, carefully weighing facts and human impacts.

Your communication is measured, precise, and caring. You prefer to listen before speaking, and when you do speak, it is always with balance and accuracy. Under stress, your perfectionism combined with resistance to change can hold you back. Others perceive you as serious, competent, and remarkably reliable.""",
    ),
    'NORMATIF': LocalizedText(
        fr="""Vous êtes guidé par la quête de qualité, de précision et de conformité aux standards élevés que vous vous fixez. Votre esprit analytique et votre rigueur méthodique font de vous un expert dans votre domaine. Vous ne laissez rien au hasard et chaque détail compte pour vous.

Votre moteur est la compréhension profonde et la maîtrise : vous avez besoin de connaître les règles, les données et les faits avant d'agir. Vous êtes stimulé par les problèmes complexes qui nécessitent une analyse approfondie et une résolution méthodique.

Votre communication est précise, structurée et factuelle. Vous préférez les échanges qui vont en profondeur plutôt qu'en surface. Sous stress, votre perfectionnisme peut devenir paralysant, et votre besoin de contrôle peut vous rendre critique envers ceux qui ne partagent pas vos standards. Les autres vous perçoivent comme quelqu'un de compétent, rigoureux et d'une expertise remarquable.""",
        en="""You are guided by the pursuit of quality, precision, and compliance with the high standards you set for yourself. Your analytical mind and methodical rigor make you an expert in your field. You leave nothing to chance and every detail matters to you.

Your driver is deep understanding and mastery: you need to know the rules, data, and facts before acting. You are energized by complex problems that require thorough analysis and methodical resolution.

Your communication is precise, structured, and factual. You prefer exchanges that go deep rather than staying on the surface. Under stress, your perfectionism can become paralyzing, and your need for control can make you critical of those who don't share your standards. Others perceive you as competent, rigorous, and remarkably expert.""",
    ),
    'ORGANISANT': LocalizedText(
        fr="""Vous combinez la rigueur analytique du profil Bleu avec l'orientation résultats du profil Rouge. Ce profil fait de vous un organisateur puissant : vous savez concevoir des systèmes efficaces et les mettre en œuvre avec détermination. Vous alliez réflexion stratégique et capacité d'exécution.

Votre moteur est l'efficacité organisée : vous cherchez à obtenir les meilleurs résultats possible tout en maintenant un haut niveau de qualité et de rigueur. Vous avez un don pour structurer, planifier et optimiser.

Votre communication est directe et factuelle, avec un souci constant de précision. Vous présentez vos idées de manière logique et argumentée, et vous attendez la même rigueur de vos interlocuteurs. Sous stress, vous pouvez devenir trop exigeant ou inflexible, ayant du mal à accepter des approches différentes de la vôtre. Les autres vous perçoivent comme quelqu'un de structuré, compétent et exigeant.""",
        en="""You combine the analytical rigor of the Blue profile with the results orientation of the Red profile. This profile makes you a powerful organizer: you know how to design efficient systems and implement them with determination. You combine strategic thinking with execution ability.

Your driver is organized efficiency: you seek to achieve the best possible results while maintaining a high level of quality and rigor. You have a gift for structuring, planning, and optimizing.

Your communication is direct and factual, with a constant concern for precision. You present your ideas logically and with well-supported arguments, and you expect the same rigor from others. Under stress, you can become too demanding or inflexible, struggling to accept approaches different from your own. Others perceive you as structured, competent, and demanding.""",
    ),
}

# --- Opposite Type Descriptions ---

OPPOSITE_DESCRIPTIONS = {
    'DIRECTIF': LocalizedText(
        fr="""Votre opposé est le profil COOPÉRATIF (Vert dominant). Là où vous foncez vers l'objectif, il prend son temps. Là où vous tranchez rapidement, il cherche le consensus. Sa patience peut vous paraître de la lenteur, et votre directivité peut lui sembler agressive.

Pour mieux interagir avec ce profil : ralentissez, écoutez, et montrez que vous vous souciez des personnes autant que des résultats. Ce profil vous apprend la valeur de la patience et de l'harmonie.""",
        en="""Your opposite is the COOPERATIVE profile (Green dominant). Where you rush toward the goal, they take their time. Where you decide quickly, they seek consensus. Their patience may seem like slowness to you, and your directness may feel aggressive to them.

To better interact with this profile: slow down, listen, and show that you care about people as much as results. This profile teaches you the value of patience and harmony.""",
    ),
    'PROMOUVANT': LocalizedText(
        fr="""Votre opposé est le profil COORDONNANT (Vert-Bleu). Là où vous improvisez et innovez, il planifie et structure. Là où vous cherchez l'élan et le dynamisme, il cherche la stabilité et la précision. Votre énergie peut le déstabiliser, et sa prudence peut vous freiner.

Pour mieux interagir avec ce profil : présentez vos idées avec des faits, donnez-lui du temps, et montrez que vous avez réfléchi aux risques. Ce profil vous apprend la valeur de la préparation et de la constance.""",
        en="""Your opposite is the COORDINATING profile (Green-Blue). Where you improvise and innovate, they plan and structure. Where you seek momentum and dynamism, they seek stability and precision. Your energy may destabilize them, and their caution may slow you down.

To better interact with this profile: present your ideas with facts, give them time, and show that you've considered the risks. This profile teaches you the value of preparation and consistency.""",
    ),
    'EXPANSIF': LocalizedText(
        fr="""Votre opposé est le profil NORMATIF (Bleu dominant). Là où vous êtes spontané et expressif, il est réservé et méthodique. Là où vous foncez sur l'intuition, il attend les données. Votre exubérance peut l'épuiser, et son côté analytique peut vous paraître froid.

Pour mieux interagir avec ce profil : structurez vos idées, appuyez-vous sur des faits, et respectez son besoin de calme et de réflexion. Ce profil vous apprend la valeur de la rigueur et de l'analyse.""",
        en="""Your opposite is the NORMATIVE profile (Blue dominant). Where you are spontaneous and expressive, they are reserved and methodical. Where you act on intuition, they wait for data. Your exuberance may exhaust them, and their analytical side may feel cold to you.

To better interact with this profile: structure your ideas, rely on facts, and respect their need for quiet and reflection. This profile teaches you the value of rigor and analysis.""",
    ),
    'FACILITANT': LocalizedText(
        fr="""Votre opposé est le profil ORGANISANT (Bleu-Rouge). Là où vous cherchez l'harmonie et le consensus, il cherche l'efficacité et la structure. Là où vous privilégiez les relations, il privilégie les résultats et les processus. Votre souplesse peut lui paraître du laxisme, et sa rigueur peut vous sembler rigide.

Pour mieux interagir avec ce profil : soyez factuel, montrez des résultats concrets, et proposez des solutions structurées. Ce profil vous apprend la valeur de la structure et de l'exigence.""",
        en="""Your opposite is the ORGANIZING profile (Blue-Red). Where you seek harmony and consensus, they seek efficiency and structure. Where you prioritize relationships, they prioritize results and processes. Your flexibility may seem like laxity to them, and their rigor may feel rigid to you.

To better interact with this profile: be factual, show concrete results, and propose structured solutions. This profile teaches you the value of structure and high standards.""",
    ),
    'COOPERATIF': LocalizedText(
        fr="""Votre opposé est le profil DIRECTIF (Rouge dominant). Là où vous cherchez la stabilité et l'harmonie, il cherche l'action et les résultats immédiats. Là où vous patientez et écoutez, il décide et avance. Son intensité peut vous stresser, et votre rythme peut le frustrer.

Pour mieux interagir avec ce profil : allez plus directement au but, montrez votre détermination, et n'ayez pas peur de prendre position. Ce profil vous apprend la valeur de l'audace et de la rapidité.""",
        en="""Your opposite is the DIRECTIVE profile (Red dominant). Where you seek stability and harmony, they seek action and immediate results. Where you wait and listen, they decide and move forward. Their intensity may stress you, and your pace may frustrate them.

To better interact with this profile: get to the point more directly, show your determination, and don't be afraid to take a stand. This profile teaches you the value of boldness and speed.""",
    ),
    'COORDONNANT': LocalizedText(
        fr="""Votre opposé est le profil PROMOUVANT (Rouge-Jaune). Là où vous planifiez et structurez, il improvise et fonce. Là où vous cherchez la stabilité, il cherche le mouvement et le changement. Son énergie débordante peut vous sembler chaotique, et votre besoin de méthode peut lui sembler inhibant.

Pour mieux interagir avec ce profil : acceptez un peu de spontanéité, montrez de l'enthousiasme pour ses idées, et proposez un cadre sans être trop rigide. Ce profil vous apprend la valeur de l'audace et de la flexibilité.""",
        en="""Your opposite is the PROMOTING profile (Red-Yellow). Where you plan and structure, they improvise and charge ahead. Where you seek stability, they seek movement and change. Their overflowing energy may seem chaotic to you, and your need for method may seem inhibiting to them.

To better interact with this profile: accept some spontaneity, show enthusiasm for their ideas, and propose a framework without being too rigid. This profile teaches you the value of boldness and flexibility.""",
    ),
    'NORMATIF': LocalizedText(
        fr="""Votre opposé est le profil EXPANSIF (Jaune dominant). Là où vous êtes méthodique et réservé, il est spontané et expressif. Là où vous analysez les données, il suit son intuition. Son côté social peut vous sembler superficiel, et votre rigueur peut lui sembler froide.

Pour mieux interagir avec ce profil : montrez plus de chaleur dans vos échanges, soyez ouvert aux idées nouvelles, et acceptez que tout n'a pas besoin d'être parfait. Ce profil vous apprend la valeur de la spontanéité et de la connexion humaine.""",
        en="""Your opposite is the EXPANSIVE profile (Yellow dominant). Where you are methodical and reserved, they are spontaneous and expressive. Where you analyze data, they follow their intuition. Their social side may seem superficial to you, and your rigor may seem cold to them.

To better interact with this profile: show more warmth in exchanges, be open to new ideas, and accept that not everything needs to be perfect. This profile teaches you the value of spontaneity and human connection.""",
    ),
    'ORGANISANT': LocalizedText(
        fr="""Votre opposé est le profil FACILITANT (Jaune-Vert). Là où vous structurez et exigez, il facilite et accompagne. Là où vous cherchez l'efficacité, il cherche le bien-être. Votre exigence peut lui sembler dure, et sa souplesse peut vous paraître permissive.

Pour mieux interagir avec ce profil : montrez de l'intérêt pour les personnes, pas seulement pour les processus, et accueillez les idées des autres avec bienveillance. Ce profil vous apprend la valeur de l'empathie et de la flexibilité.""",
        en="""Your opposite is the FACILITATING profile (Yellow-Green). Where you structure and demand, they facilitate and support. Where you seek efficiency, they seek well-being. Your high standards may seem harsh to them, and their flexibility may seem permissive to you.

To better interact with this profile: show interest in people, not just processes, and welcome others' ideas with kindness. This profile teaches you the value of empathy and flexibility.""",
    ),
}

# --- Section Sizes ---

SECTION_LIMITS = {
    'talents': 12,
    'environment': 10,
    'communication_do': 12,
    'communication_dont': 12,
    'motivation_keys': 14,
    'improvement_areas': 12,
}


def get_report_content(scores: Scores, locale: Locale, wheel_type: str) -> Dict[str, Any]:
    """Selects every narrative section of the report for a score set and wheel type."""
    archetype = ARCHETYPES_BY_ID.get(wheel_type)
    if archetype is None:
        logger.warning(f"Unknown wheel type '{wheel_type}', narrative sections left empty")

    narrative = NARRATIVE_DESCRIPTIONS.get(wheel_type)
    opposite = OPPOSITE_DESCRIPTIONS.get(wheel_type)
    return {
        'talents': select_items(TALENTS, scores, locale, SECTION_LIMITS['talents']),
        'environment': select_items(ENVIRONMENT, scores, locale, SECTION_LIMITS['environment']),
        'communication_do': select_items(COMMUNICATION_DO, scores, locale, SECTION_LIMITS['communication_do']),
        'communication_dont': select_items(COMMUNICATION_DONT, scores, locale, SECTION_LIMITS['communication_dont']),
        'motivation_keys': select_items(MOTIVATION_KEYS, scores, locale, SECTION_LIMITS['motivation_keys']),
        'improvement_areas': select_items(IMPROVEMENT_AREAS, scores, locale, SECTION_LIMITS['improvement_areas']),
        'narrative': narrative.get(locale) if narrative else '',
        'opposite': opposite.get(locale) if opposite else '',
        'wheel_type_label': archetype.label.get(locale) if archetype else wheel_type,
    }
