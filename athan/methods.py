METHODS = {
    0: {"name": "Shia Ithna-Ashari, Leva Institute, Qum"},
    1: {"name": "University of Islamic Sciences, Karachi"},
    2: {"name": "Islamic Society of North America"},
    3: {"name": "Muslim World League"},
    4: {"name": "Umm al-Qura University, Makkah"},
    5: {"name": "Egyptian General Authority of Survey"},
    7: {"name": "Institute of Geophysics, University of Tehran"},
    8: {"name": "Gulf Region"},
    9: {"name": "Kuwait"},
    10: {"name": "Qatar"},
    11: {"name": "Majlis Ugama Islam Singapura, Singapore"},
    12: {"name": "Union Organization islamic de France"},
    13: {"name": "Diyanet Isleri Baskanligi, Turkey"},
    14: {"name": "Spiritual Administration of Muslims of Russia"},
    15: {"name": "Moonsighting Committee Worldwide"},
    16: {"name": "Dubai (experimental)"},
    17: {"name": "Jabatan Kemajuan Islam Malaysia (JAKIM)"},
    18: {"name": "Tunisia"},
    19: {"name": "Algeria"},
    20: {"name": "KEMENAG, Indonesia"},
    21: {"name": "Morocco"},
    22: {"name": "Comunidade Islamica de Lisboa"},
    23: {"name": "Ministry of Awqaf, Islamic Affairs and Holy Places, Jordan"},
}

DEFAULT_METHOD = 19
