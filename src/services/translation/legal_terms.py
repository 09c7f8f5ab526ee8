"""English legal terms and their Hindi equivalents.

Keys are lower-case; values are Devanagari only so a substituted term never
reads as residual English. Consumed through `TermDictionary`.
"""

LEGAL_TERMS: dict[str, str] = {
    # Document types
    "agreement": "समझौता",
    "contract": "अनुबंध",
    "deed": "विलेख",
    "affidavit": "शपथ पत्र",
    "petition": "याचिका",
    "memorandum": "ज्ञापन",
    "will": "वसीयत",
    "power of attorney": "मुख्तारनामा",
    "lease": "पट्टा",
    "license": "लाइसेंस",
    "certificate": "प्रमाणपत्र",
    "notice": "नोटिस",
    "summons": "समन",
    "warrant": "वारंट",
    "order": "आदेश",
    "judgment": "न्यायनिर्णय",
    "decree": "डिक्री",
    "injunction": "व्यादेश",
    "document": "दस्तावेज़",
    "summary": "सारांश",
    "legal notice": "कानूनी नोटिस",
    "ordinance": "अध्यादेश",
    "notification": "अधिसूचना",
    "gazette": "राजपत्र",
    "bye-law": "उपविधि",
    # Parties and roles
    "plaintiff": "वादी",
    "defendant": "प्रतिवादी",
    "petitioner": "याचिकाकर्ता",
    "respondent": "प्रत्यर्थी",
    "applicant": "आवेदक",
    "appellant": "अपीलकर्ता",
    "complainant": "शिकायतकर्ता",
    "claimant": "दावेदार",
    "witness": "गवाह",
    "advocate": "अधिवक्ता",
    "lawyer": "वकील",
    "judge": "न्यायाधीश",
    "magistrate": "मजिस्ट्रेट",
    "arbitrator": "मध्यस्थ",
    "court": "न्यायालय",
    "tribunal": "अधिकरण",
    "party": "पक्षकार",
    "legal heir": "कानूनी वारिस",
    "heir": "वारिस",
    "executor": "निष्पादक",
    "guardian": "संरक्षक",
    "trustee": "न्यासी",
    "beneficiary": "हिताधिकारी",
    "nominee": "नामिती",
    "testator": "वसीयतकर्ता",
    "agent": "अभिकर्ता",
    "principal": "मालिक",
    "creditor": "लेनदार",
    "debtor": "देनदार",
    "guarantor": "प्रत्याभूतिदाता",
    "decree holder": "डिक्रीदार",
    "judgment debtor": "निर्णीत ऋणी",
    "employer": "नियोक्ता",
    "employee": "कर्मचारी",
    "consumer": "उपभोक्ता",
    "citizen": "नागरिक",
    "person": "व्यक्ति",
    "individual": "व्यक्ति",
    "victim": "पीड़ित",
    "aggrieved person": "व्यथित व्यक्ति",
    "officer": "अधिकारी",
    "public servant": "लोक सेवक",
    "protection officer": "संरक्षण अधिकारी",
    "revenue officer": "राजस्व अधिकारी",
    "authority": "प्राधिकरण",
    "government": "सरकार",
    "state government": "राज्य सरकार",
    "central government": "केंद्र सरकार",
    "police": "पुलिस",
    "notary": "नोटरी",
    "spouse": "पति या पत्नी",
    "husband": "पति",
    "wife": "पत्नी",
    "minor": "अवयस्क",
    # Courts
    "civil court": "सिविल न्यायालय",
    "high court": "उच्च न्यायालय",
    "supreme court": "उच्चतम न्यायालय",
    "district court": "जिला न्यायालय",
    "consumer forum": "उपभोक्ता मंच",
    "police station": "पुलिस थाना",
    # Legal concepts
    "rights": "अधिकार",
    "duties": "कर्तव्य",
    "liability": "दायित्व",
    "obligation": "बाध्यता",
    "jurisdiction": "न्यायिक क्षेत्राधिकार",
    "compensation": "मुआवजा",
    "damages": "हर्जाना",
    "penalty": "दंड",
    "fine": "जुर्माना",
    "interest": "ब्याज",
    "title": "हक",
    "property": "संपत्ति",
    "movable property": "चल संपत्ति",
    "immovable property": "अचल संपत्ति",
    "possession": "कब्जा",
    "ownership": "स्वामित्व",
    "inheritance": "विरासत",
    "succession": "उत्तराधिकार",
    "estate": "संपदा",
    "protection": "संरक्षण",
    "relief": "राहत",
    "consent": "सहमति",
    "good faith": "सद्भावना",
    "bona fide": "सद्भावपूर्ण",
    "mala fide": "असद्भावपूर्ण",
    "negligence": "उपेक्षा",
    "tort": "अपकृत्य",
    "nuisance": "उपताप",
    "defamation": "मानहानि",
    "privacy": "निजता",
    "accountability": "जवाबदेही",
    "compliance": "अनुपालन",
    "legal": "कानूनी",
    "civil": "सिविल",
    "criminal": "आपराधिक",
    "matter": "मामला",
    "case": "मामला",
    "dispute": "विवाद",
    "claim": "दावा",
    "suit": "वाद",
    "revenue": "राजस्व",
    "domestic violence": "घरेलू हिंसा",
    # Actions and processes
    "appeal": "अपील",
    "hearing": "सुनवाई",
    "trial": "मुकदमा",
    "litigation": "मुकदमेबाजी",
    "prosecution": "अभियोजन",
    "investigation": "जांच",
    "arbitration": "मध्यस्थता",
    "mediation": "मध्यस्थता",
    "conciliation": "सुलह",
    "settlement": "निपटान",
    "adjournment": "स्थगन",
    "dismissal": "खारिज",
    "acquittal": "बरी",
    "conviction": "दोषसिद्धि",
    "sentence": "सजा",
    "bail": "जमानत",
    "anticipatory bail": "अग्रिम जमानत",
    "probation": "परिवीक्षा",
    "parole": "पैरोल",
    "remand": "रिमांड",
    "review": "पुनर्विलोकन",
    "revision": "पुनरीक्षण",
    "award": "पंचाट",
    "stay order": "स्थगन आदेश",
    "interim order": "अंतरिम आदेश",
    "protection order": "संरक्षण आदेश",
    "residence order": "निवास आदेश",
    "custody order": "अभिरक्षा आदेश",
    "maintenance": "भरण-पोषण",
    "ex parte": "एकपक्षीय",
    "sub judice": "न्यायाधीन",
    "res judicata": "पूर्व न्याय",
    # Writs
    "writ": "रिट",
    "writ petition": "रिट याचिका",
    "habeas corpus": "बंदी प्रत्यक्षीकरण",
    "mandamus": "परमादेश",
    "certiorari": "उत्प्रेषण",
    "public interest litigation": "जनहित याचिका",
    "contempt of court": "न्यायालय की अवमानना",
    "legal aid": "विधिक सहायता",
    # Contract terminology
    "offer": "प्रस्ताव",
    "acceptance": "स्वीकृति",
    "consideration": "प्रतिफल",
    "breach": "उल्लंघन",
    "default": "चूक",
    "termination": "समाप्ति",
    "renewal": "नवीनीकरण",
    "amendment": "संशोधन",
    "clause": "खंड",
    "condition": "शर्त",
    "warranty": "वारंटी",
    "guarantee": "प्रत्याभूति",
    "indemnity": "क्षतिपूर्ति",
    "force majeure": "अप्रत्याशित घटना",
    "void": "शून्य",
    "voidable": "शून्यकरणीय",
    "validity": "वैधता",
    "execution": "निष्पादन",
    "performance": "पालन",
    "penalty clause": "दंड खंड",
    "payment": "भुगतान",
    "refund": "धनवापसी",
    "deposit": "जमा",
    "security deposit": "प्रतिभूति जमा",
    "collateral": "संपार्श्विक",
    "fees": "शुल्क",
    "cost": "लागत",
    "expenses": "व्यय",
    "signature": "हस्ताक्षर",
    "seal": "मुहर",
    # Property law
    "land": "भूमि",
    "building": "भवन",
    "premises": "परिसर",
    "tenant": "किरायेदार",
    "landlord": "मकान मालिक",
    "rent": "किराया",
    "mortgage": "बंधक",
    "hypothecation": "दृष्टिबंधक",
    "lien": "धारणाधिकार",
    "easement": "सुविधाधिकार",
    "encumbrance": "भार",
    "sale": "बिक्री",
    "purchase": "खरीद",
    "conveyance": "हस्तांतरण",
    "gift": "दान",
    "partition": "विभाजन",
    "stamp duty": "स्टांप शुल्क",
    "stamp paper": "स्टांप पत्र",
    "probate": "प्रोबेट",
    # Criminal law
    "offence": "अपराध",
    "crime": "अपराध",
    "accused": "अभियुक्त",
    "charge": "आरोप",
    "chargesheet": "आरोप पत्र",
    "complaint": "शिकायत",
    "grievance": "शिकायत",
    "evidence": "साक्ष्य",
    "testimony": "गवाही",
    "cross-examination": "प्रतिपरीक्षा",
    "confession": "इकबालिया बयान",
    "arrest": "गिरफ्तारी",
    "custody": "हिरासत",
    "detention": "नजरबंदी",
    "punishment": "सज़ा",
    "imprisonment": "कैद",
    "first information report": "प्रथम सूचना रिपोर्ट",
    "cognizable offence": "संज्ञेय अपराध",
    "non-cognizable offence": "असंज्ञेय अपराध",
    "bailable": "जमानतीय",
    "non-bailable": "अजमानतीय",
    "oath": "शपथ",
    "perjury": "झूठी गवाही",
    # Family law
    "marriage": "विवाह",
    "divorce": "विवाह-विच्छेद",
    "alimony": "निर्वाह-व्यय",
    "adoption": "दत्तक ग्रहण",
    # Commercial and employment law
    "company": "कंपनी",
    "corporation": "निगम",
    "partnership": "साझेदारी",
    "firm": "फर्म",
    "director": "निदेशक",
    "shareholder": "शेयरधारक",
    "dividend": "लाभांश",
    "capital": "पूंजी",
    "assets": "परिसंपत्तियां",
    "liabilities": "देनदारियां",
    "bankruptcy": "दिवालियापन",
    "insolvency": "ऋणशोधन अक्षमता",
    "liquidation": "परिसमापन",
    "winding up": "समापन",
    "merger": "विलय",
    "acquisition": "अधिग्रहण",
    "takeover": "अधिग्रहण",
    "loan": "ऋण",
    "debt": "ऋण",
    "tax": "कर",
    "income tax": "आयकर",
    "court fee": "न्यायालय शुल्क",
    "employment": "रोजगार",
    "wages": "मजदूरी",
    "salary": "वेतन",
    "gratuity": "उपदान",
    "pension": "पेंशन",
    "notice period": "सूचना अवधि",
    "resignation": "त्यागपत्र",
    # Procedure
    "application": "आवेदन",
    "motion": "प्रार्थना",
    "submission": "प्रस्तुति",
    "pleading": "अभिवचन",
    "plaint": "वादपत्र",
    "written statement": "लिखित बयान",
    "rejoinder": "प्रत्युत्तर",
    "replication": "प्रत्युत्तर",
    "affirmation": "प्रतिज्ञान",
    "verification": "सत्यापन",
    "attestation": "अनुप्रमाणन",
    "registration": "पंजीकरण",
    "filing": "दाखिल",
    "admissible": "ग्राह्य",
    "inadmissible": "अग्राह्य",
    # Time
    "date": "तारीख",
    "day": "दिन",
    "month": "महीना",
    "year": "वर्ष",
    "time period": "समयावधि",
    "deadline": "समय सीमा",
    "statute of limitations": "परिसीमा विधि",
    "limitation period": "परिसीमा अवधि",
    "effective date": "प्रभावी तिथि",
    "term": "अवधि",
    "expiry": "समाप्ति",
    "commencement": "प्रारंभ",
    # Sections of a document
    "section": "धारा",
    "article": "अनुच्छेद",
    "rule": "नियम",
    "regulation": "विनियम",
    "schedule": "अनुसूची",
    "annexure": "अनुलग्नक",
    "appendix": "परिशिष्ट",
    "chapter": "अध्याय",
    "part": "भाग",
    "paragraph": "पैराग्राफ",
    "page": "पृष्ठ",
    "provision": "उपबंध",
    "proviso": "परंतुक",
    "explanation": "स्पष्टीकरण",
    "definition": "परिभाषा",
    "interpretation": "निर्वचन",
    "ambiguity": "अस्पष्टता",
    # Summary headings
    "document overview": "दस्तावेज़ अवलोकन",
    "key parties": "मुख्य पक्षकार",
    "important clauses": "महत्वपूर्ण खंड",
    "obligations": "बाध्यताएं",
    "critical dates": "महत्वपूर्ण तिथियां",
    "potential concerns": "संभावित चिंताएं",
    "plain language summary": "सरल भाषा सारांश",
    # Legislation and doctrine
    "statute": "विधि",
    "law": "कानून",
    "act": "अधिनियम",
    "enactment": "अधिनियमन",
    "repeal": "निरसन",
    "legislation": "विधान",
    "constitution": "संविधान",
    "fundamental rights": "मौलिक अधिकार",
    "directive principles": "निर्देशक सिद्धांत",
    "right to information": "सूचना का अधिकार",
    "information": "सूचना",
    "legal representation": "विधिक प्रतिनिधित्व",
    "legal advice": "विधिक सलाह",
    "legal opinion": "विधिक राय",
    "legal procedure": "विधिक प्रक्रिया",
    "legal remedy": "कानूनी उपचार",
    "governing law": "शासी कानून",
    "applicable law": "लागू कानून",
    "jurisdiction clause": "अधिकारिता खंड",
    "dispute resolution": "विवाद समाधान",
    "severability": "पृथक्करणीयता",
    "confidentiality": "गोपनीयता",
    "non-disclosure": "गैर-प्रकटीकरण",
    "personal data": "व्यक्तिगत आंकड़े",
    "data protection": "आंकड़ा संरक्षण",
    "assignment": "समनुदेशन",
    "delegation": "प्रत्यायोजन",
    "intellectual property": "बौद्धिक संपदा",
    "copyright": "प्रतिलिप्याधिकार",
    "trademark": "व्यापार चिन्ह",
    "patent": "पेटेंट",
    "representation": "अभ्यावेदन",
    "misrepresentation": "मिथ्या प्रस्तुति",
    "fraud": "धोखाधड़ी",
    "duress": "दबाव",
    "undue influence": "अनुचित प्रभाव",
    "mistake": "गलती",
    "discharge": "निर्वहन",
    "frustration": "निष्फलता",
    "quantum meruit": "जितना किया उतना मिले",
    "specific performance": "विशिष्ट पालन",
    "declaratory relief": "घोषणात्मक राहत",
    "limitation": "परिसीमा",
    "cause of action": "वाद हेतु",
    "locus standi": "अधिकारिता",
    "prima facie": "प्रथम दृष्टया",
    "beyond reasonable doubt": "उचित संदेह से परे",
    "burden of proof": "सबूत का भार",
    "preponderance of evidence": "साक्ष्य का प्राबल्य",
}
