"""Prompt templates and fallback messages for love note generation."""

from __future__ import annotations

from string import Template

# --- Bengali prompt templates ---

BN_POEM = Template(
    "একটি সুন্দর রোমান্টিক বাংলা কবিতা লেখো ${target_name}-এর জন্য। "
    "এটি স্বপ্নময় ও মিষ্টি হোক। "
    'শেষ লাইনে লিখো — "From ${sender_name}".'
)

BN_SHAYARI = Template(
    "একটি রোমান্টিক বাংলা শায়ারি লেখো ${target_name}-এর জন্য, "
    "যা আবেগপূর্ণ এবং একদম ইউনিক হবে। "
    'শেষ লাইনে লিখো — "From ${sender_name}".'
)

BN_MESSAGE = Template(
    "${target_name}-এর জন্য একটি ভালোবাসায় ভরা বাংলা মেসেজ লেখো। "
    "এটি আন্তরিক ও হৃদয়স্পর্শী হোক। "
    'শেষ লাইনে লিখো — "From ${sender_name}".'
)

BN_COMPLIMENT = Template(
    "${target_name}-এর জন্য একটি ছোট, মিষ্টি বাংলা প্রশংসা লেখো। "
    "রোমান্টিক কিন্তু রুচিশীল রাখো। "
    'শেষ লাইনে লিখো — "From ${sender_name}".'
)

# --- English prompt templates ---

EN_POEM = Template(
    "Write a short romantic poem dedicated to ${target_name}. "
    "Make it sweet, poetic, and original. "
    'At the end add one-line sign off: "From ${sender_name}".'
)

EN_SHAYARI = Template(
    "Write a short romantic shayari for ${target_name}, "
    "emotional and completely unique. "
    'At the end add one-line sign off: "From ${sender_name}".'
)

EN_MESSAGE = Template(
    "Write a heartfelt love message for ${target_name}. "
    "Keep it sincere and touching. "
    'At the end add one-line sign off: "From ${sender_name}".'
)

EN_COMPLIMENT = Template(
    "Write a short, sweet compliment message for ${target_name}. "
    "Keep it romantic but tasteful. "
    'At the end add one-line sign off: "From ${sender_name}".'
)

DEFAULT_LANGUAGE = "bn"

# Map of prompt templates by language, then kind
PROMPT_TEMPLATES: dict[str, dict[str, Template]] = {
    "bn": {
        "poem": BN_POEM,
        "shayari": BN_SHAYARI,
        "message": BN_MESSAGE,
        "compliment": BN_COMPLIMENT,
    },
    "en": {
        "poem": EN_POEM,
        "shayari": EN_SHAYARI,
        "message": EN_MESSAGE,
        "compliment": EN_COMPLIMENT,
    },
}

# --- Fallback messages (served when the generation API is unavailable) ---

FALLBACK_MESSAGES: dict[str, tuple[Template, ...]] = {
    "shayari": (
        Template(
            "💻 কোডের মতোই তোমায় ভালোবাসা,\n"
            "Syntax error নেই, কেবল নিখুঁত ভাষা।\n"
            'if (heart == yours) return "Forever"; ❤️'
        ),
        Template(
            "🧠 আমার কোডে যত if-else আছে, "
            "সবই ${target_name}-এর জন্য truth return করে। 💘"
        ),
        Template(
            "⚙️ ${target_name}, তুমি আমার কোডের perfect algorithm — "
            "run করলে পুরো life optimize হয়ে যায়! 😍"
        ),
    ),
    "message": (
        Template(
            "👩‍💻 ${target_name}, তুমি আমার কোডের সেই missing semicolon — "
            "তোমায় ছাড়া সব incomplete লাগে। ❤️"
        ),
        Template(
            "⌨️ ভালোবাসা যদি function হত, আমি লিখতাম — love(${target_name}); 💓"
        ),
        Template(
            '🖥️ তোমার হাসিটা যেন console.log("happiness"); — '
            "একবার দেখলেই পুরো সিস্টেম fresh হয়ে যায়! 💕"
        ),
    ),
    "poem": (
        Template(
            "🧠 সফটওয়্যারের মতোই তুমি, ${target_name} — "
            "তোমার হাসিতে আমি crash হয়ে যাই,\n"
            "তোমার চোখ debug করতে করতে আমার পুরো logic হারিয়ে যায়। 💖"
        ),
        Template(
            "🌙 তোমার চোখে তারার আলো, তোমার কণ্ঠে bug-free কোডের ভালোবাসা,\n"
            "আমি compile করি তোমার নাম প্রতিদিন নতুন version-এ। 💞"
        ),
        Template(
            "⚡ তোমার presence মানে high-speed WiFi,\n"
            "তুমি ছাড়া মানে “Server Not Found”! 💻❤️"
        ),
    ),
    "compliment": (
        Template(
            "✨ ${target_name}, তোমার হাসি আমার দিনের সবচেয়ে সুন্দর release note। 💗"
        ),
        Template(
            "🌸 ${target_name}, তুমি এমন একটা UI — "
            "যেটা দেখলেই কোনো bug চোখে পড়ে না। 😊"
        ),
        Template(
            "💫 পৃথিবীর সব theme-এর মধ্যে ${target_name}-ই আমার favourite। ❤️"
        ),
    ),
}

GENERIC_FALLBACK: tuple[Template, ...] = (
    Template("💔 সার্ভার ঘুমাচ্ছে, কিন্তু ভালোবাসা জেগে আছে তোমার জন্য।"),
)
