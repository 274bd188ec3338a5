"""
Default keyword catalog.

This table is part of the scoring contract: category results are only
reproducible while its content (ids, order, keyword membership) is unchanged.
Keywords are listed both with and without locale letters because OCR output
mixes the two; the scorer normalizes them before matching.
"""

from .model import CategoryDefinition, InstrumentRule, KeywordCatalog, PriorityRule

FOOD_DRINK = CategoryDefinition(
    id="food_drink",
    merchant=(
        "starbucks", "kahve dunyasi", "kahve dünyası", "gloria jeans", "espresso lab",
        "mado", "simit sarayi", "simit sarayı", "burger king", "mcdonalds", "mcdonald's",
        "popeyes", "kfc", "dominos", "domino's", "pizza hut", "little caesars",
        "sbarro", "tavuk dunyasi", "tavuk dünyası", "komagene", "usta donerci",
        "kofteci yusuf", "köfteci yusuf", "baydoner", "cafe", "kahve", "restoran",
        "lokanta", "restaurant", "kebap", "kebab", "pide", "lahmacun",
    ),
    product=(
        "kahve", "latte", "espresso", "americano", "cappuccino", "mocha", "macchiato",
        "filtre kahve", "turk kahvesi", "türk kahvesi", "cay", "çay", "su", "kola",
        "icecek", "içecek", "meyve suyu", "smoothie", "frappe",
        "yemek", "tost", "sandvic", "sandviç", "burger", "hamburger", "pizza",
        "doner", "döner", "iskender", "corba", "çorba", "salata", "tatli", "tatlı",
        "pasta", "kek", "kurabiye", "cikolata", "çikolata", "croissant", "pogaca", "poğaça",
        "simit", "borek", "börek", "manti", "mantı", "lahmacun", "pide", "kebap",
    ),
    general=(
        "yeme", "icme", "içme", "food", "drink", "cafe", "restaurant", "menu", "menü",
        "servis", "garson", "masa", "siparis", "sipariş", "paket", "gel al",
    ),
    negative=(
        "benzin", "dizel", "motorin", "lpg", "lt", "litre", "pompa", "plaka",
        "service", "atolye", "atölye", "tamir", "eczane", "recete", "reçete",
        "pantolon", "kazak", "gomlek", "gömlek", "tisort", "tişört",
    ),
)

CLOTHING = CategoryDefinition(
    id="clothing",
    merchant=(
        "lc waikiki", "lcw", "defacto", "koton", "mavi", "mavi jeans", "colins", "colin's",
        "zara", "hm", "h&m", "bershka", "pull&bear", "pull bear", "stradivarius",
        "boyner", "flo", "atasun", "kinetix", "nike", "adidas", "puma", "new balance",
        "skechers", "under armour", "reebok", "converse", "vans", "lacoste",
        "network", "ipekyol", "vakko", "beymen", "machka", "roman",
    ),
    product=(
        "pantolon", "kazak", "gomlek", "gömlek", "tisort", "tişört", "tshirt", "t-shirt",
        "sweat", "sweatshirt", "hoodie", "mont", "kaban", "ceket", "palto",
        "etek", "elbise", "dress", "bluz", "hirka", "hırka", "yelek",
        "ayakkabi", "ayakkabı", "sneaker", "bot", "cizme", "çizme", "sandalet",
        "corap", "çorap", "kemer", "canta", "çanta", "sapka", "şapka", "bere",
        "atki", "atkı", "eldiven", "sal", "şal", "esarp", "eşarp",
    ),
    general=(
        "giyim", "giysi", "moda", "fashion", "style", "beden", "renk", "numara",
        "kumas", "kumaş", "cotton", "polyester", "denim", "jean", "jeans",
    ),
    negative=(
        "benzin", "dizel", "litre", "lt", "kdv", "fatura", "market",
        "sebze", "meyve", "sut", "süt", "peynir", "yemek", "kahve",
    ),
)

TRANSPORT = CategoryDefinition(
    id="transport",
    merchant=(
        "shell", "opet", "bp", "total", "totalenergies", "petrol", "petrol ofisi", "po",
        "aytemiz", "lukoil", "esso", "mobil", "alpet", "kadoil", "turkuaz",
        "metro", "tramvay", "otobus", "otobüs", "iett", "ego", "eshot",
        "marmaray", "izban", "baskentray", "hgs", "ogs", "bilet", "mobiett",
        "istanbulkart", "kentkart", "uber", "bitaksi", "martı", "scooter",
    ),
    product=(
        "benzin", "kursunsuz", "kurşunsuz", "dizel", "motorin", "lpg", "yakit", "yakıt",
        "litre", "lt", "pompa", "95", "97", "eurodizel", "euro diesel",
        "plaka", "arac", "araç", "otopark", "park", "vale", "bilet", "abonman", "abonelik",
        "hgs", "ogs", "gecis", "geçiş", "kopru", "köprü", "otoyol",
    ),
    general=(
        "utts", "tts", "tasit tanima", "taşıt tanıma", "filo", "otomasyon",
        "yakit otomasyon", "yakıt otomasyon", "istasyon", "akaryakit", "akaryakıt",
    ),
    negative=(
        "latte", "espresso", "cappuccino", "kahve", "kazak", "pantolon",
        "gomlek", "gömlek", "tisort", "tişört", "market", "migros",
    ),
)

MARKET = CategoryDefinition(
    id="market",
    merchant=(
        "migros", "a101", "sok", "şok", "bim", "carrefour", "file", "macrocenter",
        "macro center", "metro", "kipa", "hakmar", "bizim", "onur market",
        "gratis", "watsons", "rossmann", "eve", "cosmetica",
    ),
    product=(
        "sebze", "meyve", "sut", "süt", "peynir", "yogurt", "yoğurt",
        "ekmek", "yumurta", "et", "tavuk", "balik", "balık",
        "deterjan", "temizlik", "poset", "poşet", "cips", "biskuvi", "bisküvi",
        "cikolata", "çikolata", "sakiz", "sakız", "seker", "şeker",
        "makarna", "pirinc", "pirinç", "bulgur", "un", "yag", "yağ",
        "tuz", "baharat", "sos", "konserve", "dondurma", "meyve suyu",
    ),
    general=(
        "market", "supermarket", "süpermarket", "alisveris", "alışveriş",
        "groseri", "grocery", "kasaodeme", "kasa", "sepet",
    ),
    negative=(
        "benzin", "dizel", "motorin", "litre", "lt", "pantolon", "kazak",
        "ayakkabi", "ayakkabı", "abonelik", "fatura",
    ),
)

SERVICE = CategoryDefinition(
    id="service",
    merchant=(
        "turkcell", "vodafone", "turktelekom", "türk telekom", "superonline", "superbox",
        "iski", "igdas", "igdaş", "bedas", "başkent gaz", "izgas", "egegaz",
        "enerjisa", "ckedas", "gediz", "toroslar", "bogazici", "boğaziçi",
        "netflix", "spotify", "youtube", "google", "apple", "icloud",
        "amazon", "prime", "disney",
    ),
    product=(
        "fatura", "abonelik", "aidat", "tahsilat", "hizmet bedeli",
        "elektrik", "su", "dogalgaz", "doğalgaz", "internet", "telefon",
        "hat", "paket", "tarife", "kontör", "kontor",
    ),
    general=(
        "servis", "hizmet", "ucret", "ücret", "odeme", "ödeme", "donem", "dönem",
        "ay", "aylik", "aylık", "yillik", "yıllık",
    ),
    negative=(
        "latte", "espresso", "kahve", "yemek", "benzin", "dizel",
        "pantolon", "kazak", "market",
    ),
)

HEALTH = CategoryDefinition(
    id="health",
    merchant=(
        "eczane", "pharmacy", "hastane", "hospital", "klinik", "clinic",
        "medikal", "medical", "saglik", "sağlık", "poliklinik",
        "dis", "diş", "goz", "göz", "laboratuvar", "lab",
    ),
    product=(
        "ilac", "ilaç", "recete", "reçete", "muayene", "serum", "vitamin",
        "aspirin", "parol", "antibiyotik", "sargı", "bant", "alerji",
        "sinüs", "grip", "soguk alginligi", "soğuk algınlığı",
    ),
    general=(
        "saglik", "sağlık", "health", "tedavi", "terapi", "doktor", "dr",
        "hekim", "uzman", "randevu",
    ),
    negative=(
        "benzin", "lt", "litre", "market", "kahve", "yemek",
    ),
)

EQUIPMENT = CategoryDefinition(
    id="equipment",
    merchant=(
        "teknosa", "vatan", "mediamarkt", "media markt", "apple", "apple store",
        "samsung", "xiaomi", "huawei", "hepsiburada", "trendyol", "n11",
        "amazon", "gittigidiyor",
    ),
    product=(
        "iphone", "telefon", "bilgisayar", "laptop", "tablet", "ipad",
        "ekran", "monitor", "monitör", "klavye", "mouse", "fare",
        "kulaklik", "kulaklık", "sarj", "şarj", "kablo", "adaptör",
        "yazici", "yazıcı", "printer", "harddisk", "ssd", "ram",
    ),
    general=(
        "ofis", "donanim", "donanım", "ekipman", "elektronik", "tech", "teknoloji",
    ),
    negative=(
        "benzin", "market", "kahve", "yemek", "pantolon", "kazak",
    ),
)

ENTERTAINMENT = CategoryDefinition(
    id="entertainment",
    merchant=(
        "sinema", "cinema", "cinemaximum", "mars", "avsar", "tiyatro", "theatre",
        "konser", "biletix", "biletinial", "passo", "playstation", "steam",
        "xbox", "nintendo", "boks", "spor",
    ),
    product=(
        "bilet", "ticket", "gise", "gişe", "koltuk", "seans", "film",
        "oyun", "game", "konsol", "abonelik", "premium",
    ),
    general=(
        "eglence", "eğlence", "entertainment", "fun", "hobi", "aktivite",
    ),
    negative=(
        "benzin", "market", "kahve", "eczane",
    ),
)

EDUCATION = CategoryDefinition(
    id="education",
    merchant=(
        "udemy", "coursera", "skillshare", "linkedin learning",
        "kurs", "course", "egitim", "eğitim", "akademi", "okul",
        "universite", "üniversite", "kitap", "book", "d&r", "dr",
        "kitapyurdu", "idefix", "remzi", "yapi kredi yayinlari",
    ),
    product=(
        "kitap", "book", "dergi", "magazine", "kurs", "course",
        "egitim", "eğitim", "ders", "seminer", "webinar", "sertifika",
    ),
    general=(
        "ogrenme", "öğrenme", "learning", "study", "calisma", "çalışma",
    ),
    negative=(
        "benzin", "market", "kahve", "yemek",
    ),
)

TRAVEL = CategoryDefinition(
    id="travel",
    merchant=(
        "otel", "hotel", "booking", "airbnb", "trivago", "hotels",
        "ucak", "uçak", "flight", "thy", "turk hava yollari", "türk hava yolları",
        "pegasus", "anadolujet", "sunexpress", "seyahat", "travel",
        "ets tur", "jolly", "tatil", "holiday",
    ),
    product=(
        "konaklama", "accommodation", "oda", "room", "rezervasyon",
        "ucak bileti", "uçak bileti", "flight ticket", "otel", "hotel",
        "tatil", "holiday", "tur", "tour", "gezi", "trip",
    ),
    general=(
        "seyahat", "travel", "turizm", "tourism", "vize", "visa", "pasaport",
    ),
    negative=(
        "benzin", "market", "kahve",
    ),
)

RENT = CategoryDefinition(
    id="rent",
    merchant=(
        "emlak", "remax", "century21", "coldwell banker", "emlakjet",
        "sahibinden", "hepsiemlak",
    ),
    product=(
        "kira", "rent", "depozito", "aidat", "kontrat", "sozlesme", "sözleşme",
    ),
    general=(
        "emlak", "apartman", "daire", "ev", "konut", "gayrimenkul",
    ),
    negative=(
        "benzin", "market", "kahve", "yemek",
    ),
)

TAX = CategoryDefinition(
    id="tax",
    merchant=(
        "vergi dairesi", "maliye", "sgk", "sosyal guvenlik",
        "gelir idaresi", "gib",
    ),
    product=(
        "vergi", "sgk", "stopaj", "otv", "ötv", "kdv", "mtv",
        "harc", "harç", "ceza", "gecikme", "faiz",
    ),
    general=(
        "beyanname", "tahakkuk", "odeme", "ödeme", "taksit",
    ),
    negative=(
        "benzin", "market", "kahve", "yemek",
    ),
)

DEFAULT_CATEGORIES = (
    FOOD_DRINK,
    CLOTHING,
    TRANSPORT,
    MARKET,
    SERVICE,
    HEALTH,
    EQUIPMENT,
    ENTERTAINMENT,
    EDUCATION,
    TRAVEL,
    RENT,
    TAX,
)

FUEL_TERMS = ("benzin", "dizel", "motorin", "lpg", "pompa", "litre", "lt")
COFFEE_TERMS = ("latte", "espresso", "cappuccino", "americano", "mocha", "macchiato")

DEFAULT_PRIORITY_RULES = (
    PriorityRule(
        name="fuel",
        triggers=FUEL_TERMS,
        suppressors=COFFEE_TERMS,
        boosted=("transport",),
        penalized=("food_drink",),
    ),
    PriorityRule(
        name="coffee",
        triggers=COFFEE_TERMS,
        suppressors=FUEL_TERMS,
        boosted=("food_drink",),
        penalized=("transport",),
    ),
)

# Vehicle-recognition fleet fuel and toll passes. Such slips are frequently
# miscategorized, so they always go to review under transport.
UTTS_INSTRUMENT = InstrumentRule(
    name="utts",
    category_id="transport",
    keywords=(
        "utts", "tts", "taşıt tanıma", "tasit tanima", "plaka", "filo",
        "yakıt otomasyon", "yakit otomasyon", "opet taşıt", "shell tts", "bp taşıt",
        "kurşunsuz", "kursunsuz", "motorin", "dizel", "hgs", "ogs",
    ),
    patterns=(r"\d+[.,]\d+\s*(?:LT|LİTRE|LITRE)\b",),
)

DEFAULT_INSTRUMENT_RULES = (UTTS_INSTRUMENT,)


def default_catalog() -> KeywordCatalog:
    """Build the default catalog. Callers build it once and share it."""
    return KeywordCatalog(
        DEFAULT_CATEGORIES,
        priority_rules=DEFAULT_PRIORITY_RULES,
        instrument_rules=DEFAULT_INSTRUMENT_RULES,
    )
