"""Static roast template bank.

Each template pairs a trigger predicate over the `FeatureSet` with the
candidate lines for one category at one minimum intensity. `{BW1}` and
`{BW2}` are filled with detected buzzwords after a line is picked.
"""

from dataclasses import dataclass
from typing import Callable, Literal

from resumeroast.services.features import FeatureSet

RoastLevel = Literal["light", "medium", "spicy"]

LEVEL_ORDER: dict[str, int] = {"light": 0, "medium": 1, "spicy": 2}

OVERALL = "overall"
FINISHER = "finisher"


@dataclass(frozen=True)
class RoastTemplate:
    min_level: RoastLevel
    trigger: Callable[[FeatureSet], bool]
    category: str
    lines: tuple[str, ...]


def always(f: FeatureSet) -> bool:
    return True


def no_metrics(f: FeatureSet) -> bool:
    return f.quick_metric_count == 0


def buzzword_heavy(f: FeatureSet) -> bool:
    return f.buzzword_count > 3


def has_vague_phrases(f: FeatureSet) -> bool:
    return len(f.vague_phrases) > 0


def few_bullets(f: FeatureSet) -> bool:
    return f.bullet_count < 5


def no_projects(f: FeatureSet) -> bool:
    return not f.mentions_section("projects")


def generic_skills(f: FeatureSet) -> bool:
    return len(f.tech_stack) < 3


def no_summary(f: FeatureSet) -> bool:
    return not f.mentions_section("summary") and f.word_count > 200


def no_links(f: FeatureSet) -> bool:
    return f.link_count == 0


def too_long(f: FeatureSet) -> bool:
    return f.word_count > 1000


def too_short(f: FeatureSet) -> bool:
    return 30 < f.word_count < 150


TEMPLATES: tuple[RoastTemplate, ...] = (
    RoastTemplate("light", always, OVERALL, (
        "I've seen better resumes on the back of napkins at a Denny's.",
        "Your resume walked into the room and the ATS system literally threw up.",
        "This resume has the energy of a participation trophy.",
        "If resumes were movies, yours would go straight to DVD. In 2004.",
        "Your resume reads like a Wikipedia article nobody bothered to cite.",
        "This resume is the 'we have a candidate at home' of resumes.",
    )),
    RoastTemplate("medium", always, OVERALL, (
        "I've read tax forms more exciting than this resume. And I've read a LOT of tax forms.",
        "Your resume is proof that spell check doesn't fix boring.",
        "This resume needs less buzzwords and more 'I actually did something.'",
        "If your resume were a meal, it'd be unseasoned chicken breast on a paper plate.",
        "Your resume is like a horror movie - terrifying, but for all the wrong reasons.",
        "I showed this resume to a recruiter and they asked for combat pay.",
    )),
    RoastTemplate("spicy", always, OVERALL, (
        "Holy hell, did you write this resume during a damn earthquake?",
        "This resume is so bad, LinkedIn would reject it as spam. And LinkedIn accepts EVERYTHING.",
        "Whoever told you this resume was good needs to be fired. Then rehired. Then fired again.",
        "Your resume hits different. And by 'different' I mean 'like a truck full of red flags.'",
        "This resume is the professional equivalent of showing up to a job interview in Crocs.",
        "Jesus Christ, I've seen better-organized crime scenes than this resume.",
    )),
    RoastTemplate("light", no_metrics, "no_metrics", (
        "Not a single number in sight. Did you think this was a poetry reading?",
        "Your achievements section is just... vibes. Recruiters need numbers, not aura.",
        "Zero metrics. You could have made some up and it would've been an improvement.",
        "Show me the numbers! Where are the damn numbers?!",
    )),
    RoastTemplate("medium", no_metrics, "no_metrics", (
        "You managed to write an entire resume without a single measurable achievement. "
        "That's actually impressive in the worst way.",
        "Not one percentage, not one dollar figure, not one 'increased by.' What the hell did you do all day?",
        "The absence of metrics here is so complete, I'm almost in awe. "
        "It's like you're allergic to accountability.",
    )),
    RoastTemplate("spicy", no_metrics, "no_metrics", (
        "Not a single goddamn metric. Did you just sit in a chair for three years and call it 'experience'?",
        "Zero numbers. Your resume is basically a long-form excuse note from your career.",
        "The sheer audacity of submitting a resume with zero metrics. I respect the delusion.",
    )),
    RoastTemplate("light", buzzword_heavy, "buzzwords", (
        '"{BW1}" and "{BW2}" in the same resume? Corporate bingo is not a skill.',
        "Your resume reads like someone ate a LinkedIn post and threw up on a Word doc.",
        "If I had a dollar for every buzzword, I could afford to stop reading this.",
    )),
    RoastTemplate("medium", buzzword_heavy, "buzzwords", (
        "You crammed so many buzzwords in here, I thought this was a Fortune 500 press release.",
        "Somewhere, a recruiter just rolled their eyes so hard they saw their own brain.",
        "Your buzzword-to-substance ratio is genuinely concerning.",
    )),
    RoastTemplate("spicy", buzzword_heavy, "buzzwords", (
        "The buzzword density here could power a goddamn LinkedIn influencer for a month.",
        "I swear you just fed a thesaurus into a blender and hit 'resume mode.'",
        "Calling yourself a 'dynamic synergy-driven thought leader' isn't a personality. It's a cry for help.",
    )),
    RoastTemplate("light", has_vague_phrases, "vague", (
        '"Responsible for" what, exactly? Existing? Showing up?',
        "Your bullet points have all the specificity of a horoscope.",
        "'Assisted in various tasks' - please, tell me less.",
    )),
    RoastTemplate("medium", has_vague_phrases, "vague", (
        "'Responsible for' is doing a lot of heavy lifting here. Unfortunately, your resume isn't.",
        "These bullets are so vague, a psychic couldn't tell what you actually did.",
        "Your 'experience' section reads like a really boring mystery novel with no resolution.",
    )),
    RoastTemplate("spicy", has_vague_phrases, "vague", (
        "'Responsible for various tasks.' That's literally the most useless sentence in the English language.",
        "Your bullets are so vague, they'd fail a background check on THEMSELVES.",
        "I've seen fortune cookies with more detail than your work history.",
    )),
    RoastTemplate("light", few_bullets, "weak_bullets", (
        "You have fewer bullet points than a grocery list for a college student.",
        "Your resume is lighter than a rice cake and twice as bland.",
    )),
    RoastTemplate("medium", few_bullets, "weak_bullets", (
        "This resume has fewer bullet points than my morning to-do list, and mine just says 'coffee.'",
        "Did you run out of things to say or did you just give up?",
    )),
    RoastTemplate("light", no_projects, "no_projects", (
        "No projects section? Do you even build things?",
        "Where are your side projects? Your experiments? Your 'look what I made'?",
    )),
    RoastTemplate("medium", no_projects, "no_projects", (
        "No projects section at all. What do you do outside of work, just stare at the ceiling?",
        "The absence of a projects section is deafening. It screams 'I only code when someone pays me.'",
    )),
    RoastTemplate("spicy", no_projects, "no_projects", (
        "No projects? No GitHub? No portfolio? What the hell have you been doing with your life?",
        "Not a single side project. Your passion for this career could be measured with a damn microscope.",
    )),
    RoastTemplate("light", generic_skills, "generic_skills", (
        "Your skills section is so generic, it could belong to literally anyone.",
        "Listing 'Microsoft Office' as a skill in 2024 is certainly a choice.",
    )),
    RoastTemplate("medium", generic_skills, "generic_skills", (
        "Your skill list reads like the default settings on a new laptop.",
        "I've seen more specialized skill sets on a Swiss Army knife.",
    )),
    RoastTemplate("light", no_summary, "no_summary", (
        "No summary? You just threw us in without even a 'hello'? Bold.",
        "Starting a resume without a summary is like starting a conversation mid-sentence.",
    )),
    RoastTemplate("medium", no_summary, "no_summary", (
        "You skipped the summary section like it was leg day at the gym.",
        "No profile summary. The recruiter has to just... guess who you are? Cool cool cool.",
    )),
    RoastTemplate("light", no_links, "no_links", (
        "Not a single link? No GitHub, no LinkedIn, no portfolio. Mystery candidate.",
        "Zero URLs. In 2024. Are you in witness protection?",
    )),
    RoastTemplate("medium", no_links, "no_links", (
        "No links at all? Your online presence is as invisible as your resume is bland.",
        "Zero links. Either you don't have an internet presence or you're actively hiding from it.",
    )),
    RoastTemplate("light", too_long, "too_long", (
        "This is a resume, not a novel. Brevity is the soul of getting hired.",
        "You wrote a small book. Recruiters spend 6 seconds. SIX. SECONDS.",
    )),
    RoastTemplate("medium", too_long, "too_long", (
        "Your resume is so long, it needs a table of contents and an index.",
        "I started reading this resume yesterday and I'm still not done.",
    )),
    RoastTemplate("light", too_short, "too_short", (
        "This resume is shorter than a tweet thread. Actually, that's an insult to tweets.",
        "Is this your resume or your Tinder bio? Either way, swipe left.",
    )),
    RoastTemplate("light", always, FINISHER, (
        "Look, I'm roasting because I care. Now go fix this thing.",
        "On the bright side, the only direction from here is up. WAY up.",
        "Your resume has potential. It's just buried under a mountain of mediocrity.",
        "The good news? You can fix all of this. The bad news? You need to fix all of this.",
    )),
    RoastTemplate("medium", always, FINISHER, (
        "I've seen worse resumes. But I had to really think about it.",
        "This resume is fixable. But we're talking renovations, not a fresh coat of paint.",
        "Take this roast, learn from it, and come back stronger. "
        "Your resume sure as hell can't come back weaker.",
    )),
    RoastTemplate("spicy", always, FINISHER, (
        "Holy hell, what a ride. Go rewrite this entire damn thing and come back when you're serious.",
        "If your career was a stock, your resume just triggered a sell-off. Time to rally.",
        "I'm done. My eyes need therapy. Go fix this abomination.",
    )),
)

TITLES: dict[str, tuple[str, ...]] = {
    "light": ("A Gentle Flame", "Lightly Toasted", "The Warm-Up Act"),
    "medium": ("Medium Rare Reality Check", "The Heat Is On", "No Mercy, Some Restraint"),
    "spicy": ("Absolute Inferno", "Career Cremation", "The Full Scorched Earth"),
}

REDEMPTIONS = (
    "Add 3-5 quantified metrics to your strongest bullet points",
    "Create a projects section with links to actual work you've shipped",
    "Replace every 'responsible for' with a strong action verb + measurable result",
    "Add your GitHub/portfolio link - show, don't just tell",
    "Cut the buzzwords and replace with specific technologies and outcomes",
    "Trim your resume to one page with only your strongest achievements",
    "Write a 2-3 sentence summary that positions you clearly for your target role",
    "Rewrite your weakest bullets using the format: Verb + What + Tech + Result",
)

BOUNDARIES = (
    "This roast targets your resume's writing and content, not you as a person.",
    "Strong language is used for comedic effect only.",
    "No personal attacks, slurs, or discriminatory content.",
)
