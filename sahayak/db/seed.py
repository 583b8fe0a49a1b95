"""
Sample welfare schemes.
Upserted by name, so seeding can run on every startup.
"""

import logging
from typing import Any, Dict, List

from sahayak.db.repositories.schemes import SchemeRepository

logger = logging.getLogger(__name__)


SAMPLE_SCHEMES: List[Dict[str, Any]] = [
    {
        "id": "pm-kisan",
        "name": "PM-KISAN Samman Nidhi",
        "name_i18n": {
            "hi": "प्रधानमंत्री किसान सम्मान निधि",
            "te": "ప్రధానమంత్రి కిసాన్ సమ్మాన్ నిధి",
            "ta": "பிரதான மந்திரி கிசான் சம்மான் நிதி",
            "bn": "প্রধানমন্ত্রী কিসান সম্মান নিধি",
            "mr": "प्रधानमंत्री किसान सम्मान निधी",
            "gu": "પ્રધાનમંત્રી કિસાન સમ્માન નિધિ",
            "kn": "ಪ್ರಧಾನಮಂತ್ರಿ ಕಿಸಾನ್ ಸಮ್ಮಾನ್ ನಿಧಿ",
            "ml": "പ്രധാനമന്ത്രി കിസാൻ സമ്മാൻ നിധി",
            "pa": "ਪ੍ਰਧਾਨ ਮੰਤਰੀ ਕਿਸਾਨ ਸਮ੍ਮਾਨ ਨਿਧੀ",
            "or": "ପ୍ରଧାନମନ୍ତ୍ରୀ କିସାନ ସମ୍ମାନ ନିଧି",
            "as": "প্ৰধানমন্ত্ৰী কিসান সম্মান নিধি",
        },
        "description": "Financial assistance to small and marginal farmers",
        "description_i18n": {
            "hi": "छोटे और सीमांत किसानों को वित्तीय सहायता",
            "te": "చిన్న మరియు ఉపాంత రైతులకు ఆర్థిక సహాయం",
            "ta": "சிறு மற்றும் குறு விவசாயிகளுக்கு நிதி உதவி",
            "bn": "ক্ষুদ্র ও প্রান্তিক কৃষকদের আর্থিক সহায়তা",
            "mr": "लहान आणि सीमांत शेतकऱ्यांना आर्थिक मदत",
            "gu": "નાના અને સીમાંત ખેડૂતોને નાણાકીય સહાય",
        },
        "benefit_amount": "₹6,000 per year",
        "benefit_i18n": {
            "hi": "₹6,000 प्रति वर्ष",
            "te": "సంవత్సరానికి ₹6,000",
            "ta": "ஆண்டுக்கு ₹6,000",
            "bn": "বছরে ₹6,000",
            "mr": "₹6,000 प्रति वर्ष",
        },
        "category": "agriculture",
        "eligibility": {
            "landHolding": "up to 2 hectares",
            "farmer": True,
            "citizenship": "Indian"
        },
        "documents": ["Aadhaar Card", "Bank Account Details", "Land Records"],
        "application_process": "Apply online at pmkisan.gov.in or visit nearest Common Service Center",
        "application_url": "https://pmkisan.gov.in",
    },
    {
        "id": "pmay",
        "name": "Pradhan Mantri Awas Yojana",
        "name_i18n": {
            "hi": "प्रधानमंत्री आवास योजना",
            "mr": "प्रधानमंत्री आवास योजना",
            "bn": "প্রধানমন্ত্রী আবাস যোজনা",
            "ta": "பிரதான் மந்திரி ஆவாஸ் யோஜனா",
        },
        "description": "Housing scheme for economically weaker sections",
        "description_i18n": {
            "hi": "आर्थिक रूप से कमजोर वर्गों के लिए आवास योजना",
        },
        "benefit_amount": "Subsidy up to ₹2.67 lakh",
        "benefit_i18n": {"hi": "₹2.67 लाख तक की सब्सिडी"},
        "category": "housing",
        "eligibility": {
            "income": "below 18 lakh annually",
            "firstTimeHomeBuyer": True,
            "citizenship": "Indian"
        },
        "documents": ["Aadhaar Card", "Income Certificate", "Bank Statements"],
        "application_process": "Apply through authorized banks or online portal",
        "application_url": "https://pmaymis.gov.in",
    },
    {
        "id": "ayushman-bharat",
        "name": "Ayushman Bharat",
        "name_i18n": {
            "hi": "आयुष्मान भारत",
            "te": "ఆయుష్మాన్ భారత్",
            "ta": "ஆயுஷ்மான் பாரத்",
            "bn": "আয়ুষ্মান ভারত",
            "mr": "आयुष्मान भारत",
            "gu": "આયુષ્માન ભારત",
            "kn": "ಆಯುಷ್ಮಾನ್ ಭಾರತ್",
        },
        "description": "Health insurance cover for poor and vulnerable families",
        "description_i18n": {
            "hi": "गरीब और कमजोर परिवारों के लिए स्वास्थ्य बीमा",
        },
        "benefit_amount": "Health cover up to ₹5 lakh per family per year",
        "benefit_i18n": {"hi": "प्रति परिवार प्रति वर्ष ₹5 लाख तक का स्वास्थ्य कवर"},
        "category": "health",
        "eligibility": {"secc2011": True, "citizenship": "Indian"},
        "documents": ["Aadhaar Card", "Ration Card"],
        "application_process": "Check eligibility at a Common Service Center or empanelled hospital",
        "application_url": "https://pmjay.gov.in",
    },
    {
        "id": "nsp-scholarship",
        "name": "National Scholarship Portal - Post Matric Scholarship",
        "name_i18n": {
            "hi": "राष्ट्रीय छात्रवृत्ति पोर्टल - पोस्ट मैट्रिक छात्रवृत्ति",
        },
        "description": "Scholarships for students from low-income families pursuing higher education",
        "description_i18n": {
            "hi": "उच्च शिक्षा प्राप्त कर रहे कम आय वाले परिवारों के छात्रों के लिए छात्रवृत्ति",
        },
        "benefit_amount": "Tuition fee and maintenance allowance",
        "category": "education",
        "eligibility": {"familyIncome": "below 2.5 lakh annually", "student": True},
        "documents": ["Aadhaar Card", "Income Certificate", "Marksheet", "Bank Account Details"],
        "application_process": "Register and apply at scholarships.gov.in",
        "application_url": "https://scholarships.gov.in",
    },
    {
        "id": "mgnrega",
        "name": "Mahatma Gandhi National Rural Employment Guarantee",
        "name_i18n": {"hi": "महात्मा गांधी राष्ट्रीय ग्रामीण रोजगार गारंटी"},
        "description": "Guaranteed 100 days of wage employment for rural households",
        "description_i18n": {"hi": "ग्रामीण परिवारों को 100 दिन के रोजगार की गारंटी"},
        "benefit_amount": "100 days of paid work per year",
        "category": "employment",
        "eligibility": {"rural": True, "ageMin": 18},
        "documents": ["Aadhaar Card", "Job Card"],
        "application_process": "Apply for a job card at the Gram Panchayat",
        "application_url": "https://nrega.nic.in",
    },
    {
        "id": "ladki-bahin",
        "name": "Mukhyamantri Majhi Ladki Bahin Yojana",
        "name_i18n": {
            "mr": "मुख्यमंत्री माझी लाडकी बहीण योजना",
            "hi": "मुख्यमंत्री माझी लाडकी बहीण योजना",
        },
        "description": "Monthly financial support for women in Maharashtra",
        "description_i18n": {"mr": "महाराष्ट्रातील महिलांना मासिक आर्थिक मदत"},
        "benefit_amount": "₹1,500 per month",
        "category": "women",
        "eligibility": {"gender": "female", "ageMin": 21, "ageMax": 65},
        "documents": ["Aadhaar Card", "Domicile Certificate", "Bank Account Details"],
        "application_process": "Apply through the Nari Shakti Doot app or Anganwadi centre",
        "application_url": "https://ladakibahin.maharashtra.gov.in",
        "state": "Maharashtra",
    },
]


async def seed_schemes(schemes: List[Dict[str, Any]] = None) -> int:
    """Upsert sample schemes by name. Returns the number written."""
    repo = SchemeRepository()
    schemes = SAMPLE_SCHEMES if schemes is None else schemes

    for data in schemes:
        await repo.upsert_by_name(data)

    logger.info(f"Seeded {len(schemes)} schemes")
    return len(schemes)
