# -*- coding: utf-8 -*-
"""
UI string tables.

English and Japanese are fully translated. Other locales start as copies of
English and are overridden key by key as translations land.
"""

UI_EN = {
    "site.title": "Genryu Japan",
    "site.subtitle": "A quiet interface to deep Japanese context",
    "site.tagline": "The Origin of Flow",
    "nav.home": "Home",
    "nav.culture": "Culture",
    "nav.language": "Language",
    "nav.food": "Food",
    "nav.society": "Society",
    "nav.art": "Art",
    "nav.travel": "Travel",
    "nav.about": "About",
    "home.editorialPicks": "Editorial Picks",
    "home.categoryGlimpses": "Explore by Category",
    "home.deepDive": "Deep Dive",
    "home.deepDiveDesc": "Long-form essays on Japanese culture, edited from a personal perspective.",
    "home.aboutTeaser": "About Genryu Japan",
    "home.aboutTeaserText": "Zen, Gen, Zine are not categories, but perspectives.",
    "home.more": "More",
    "home.comingSoon": "Coming soon...",
    "home.learnMore": "Learn more",
    "article.readMore": "Read more",
    "article.readTime": "min read",
    "article.publishedOn": "Published on",
    "footer.philosophy": "Zen / Gen / Zine",
    "footer.tagline": "Exploring Japan through context, not clichés.",
    "footer.navigate": "Navigate",
    "footer.connect": "Connect",
    "footer.copyright": "All rights reserved",
    "footer.privacy": "Privacy",
}

UI_JA = {
    "site.title": "源流ジャパン",
    "site.subtitle": "深い日本の文脈への静かなインターフェース",
    "site.tagline": "The Origin of Flow",
    "nav.home": "ホーム",
    "nav.culture": "文化",
    "nav.language": "言語",
    "nav.food": "食",
    "nav.society": "社会",
    "nav.art": "アート",
    "nav.travel": "旅",
    "nav.about": "について",
    "home.editorialPicks": "編集部のおすすめ",
    "home.categoryGlimpses": "カテゴリから探す",
    "home.deepDive": "Deep Dive",
    "home.deepDiveDesc": "日本文化についての長文エッセイ、個人的視点から編集",
    "home.aboutTeaser": "源流ジャパンについて",
    "home.aboutTeaserText": "Zen、Gen、Zineはカテゴリではなく、視点です。",
    "home.more": "もっと見る",
    "home.comingSoon": "準備中...",
    "home.learnMore": "もっと知る",
    "article.readMore": "続きを読む",
    "article.readTime": "分",
    "article.publishedOn": "公開日",
    "footer.philosophy": "Zen / Gen / Zine",
    "footer.tagline": "日本を文脈から探る、クリシェではなく",
    "footer.navigate": "ナビゲーション",
    "footer.connect": "つながる",
    "footer.copyright": "All rights reserved",
    "footer.privacy": "プライバシー",
}

UI = {
    "en": UI_EN,
    "ja": UI_JA,
    "es": dict(UI_EN),
    "fr": dict(UI_EN),
    "th": dict(UI_EN),
    "id": dict(UI_EN),
    "zh": dict(UI_EN),
    "de": dict(UI_EN),
}

# Month names for long-form dates
MONTHS = {
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
    "es": ["enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
           "agosto", "septiembre", "octubre", "noviembre", "diciembre"],
    "fr": ["janvier", "février", "mars", "avril", "mai", "juin", "juillet",
           "août", "septembre", "octobre", "novembre", "décembre"],
    "de": ["Januar", "Februar", "März", "April", "Mai", "Juni", "Juli",
           "August", "September", "Oktober", "November", "Dezember"],
    "id": ["Januari", "Februari", "Maret", "April", "Mei", "Juni", "Juli",
           "Agustus", "September", "Oktober", "November", "Desember"],
    "th": ["มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
           "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม"],
}

# Long date patterns; {year} for th is the Buddhist Era year
DATE_FORMATS = {
    "en": "{month_name} {day}, {year}",
    "ja": "{year}年{month}月{day}日",
    "zh": "{year}年{month}月{day}日",
    "es": "{day} de {month_name} de {year}",
    "fr": "{day} {month_name} {year}",
    "de": "{day}. {month_name} {year}",
    "id": "{day} {month_name} {year}",
    "th": "{day} {month_name} {year}",
}
