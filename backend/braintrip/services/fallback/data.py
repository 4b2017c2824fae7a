"""Hand-curated trivia and suggestions for a few major cities.

Keys are lowercase city names; lookups match by substring in either
direction (see :mod:`braintrip.services.fallback.service`).
"""

from braintrip.models import Category, Suggestion, TriviaQuestion


def _q(question: str, options: list[str], correct_index: int, fun_fact: str) -> TriviaQuestion:
    return TriviaQuestion(
        question=question, options=options, correct_index=correct_index, fun_fact=fun_fact
    )


def _place(
    title: str,
    description: str,
    category: Category,
    fun_fact: str,
    address: str,
    lat: float,
    lng: float,
) -> Suggestion:
    return Suggestion(
        title=title,
        description=description,
        category=category.value,
        fun_fact=fun_fact,
        address=address,
        lat=lat,
        lng=lng,
        enriched=True,
    )


CURATED_QUESTIONS: dict[str, list[TriviaQuestion]] = {
    "new york": [
        _q(
            "What year was the Statue of Liberty dedicated?",
            ["1876", "1886", "1896", "1906"],
            1,
            "The statue was a gift from France to the United States.",
        ),
        _q(
            "Which borough of New York is the most populous?",
            ["Manhattan", "Queens", "Brooklyn", "The Bronx"],
            2,
            "Brooklyn would be the fourth-largest city in the US if it were independent.",
        ),
        _q(
            "What was Times Square originally called?",
            ["Herald Square", "Longacre Square", "Madison Square", "Union Square"],
            1,
            "It was renamed in 1904 after The New York Times moved its headquarters there.",
        ),
        _q(
            "How long is the Brooklyn Bridge?",
            ["1,825 feet", "3,460 feet", "5,989 feet", "8,120 feet"],
            2,
            "When completed in 1883, it was the longest suspension bridge in the world.",
        ),
        _q(
            "Which park is the largest in Manhattan?",
            ["Central Park", "Riverside Park", "Inwood Hill Park", "Battery Park"],
            0,
            "Central Park spans 843 acres and was the first public park in America.",
        ),
        _q(
            "What style of pizza is New York famous for?",
            ["Deep dish", "Thin crust foldable slices", "Sicilian square", "Stuffed crust"],
            1,
            "New York-style pizza is characterized by its large, foldable slices with a thin, crispy crust.",
        ),
        _q(
            "Which museum has the Temple of Dendur?",
            ["MoMA", "The Met", "Guggenheim", "Whitney"],
            1,
            "The temple is over 2,000 years old and was gifted by Egypt in 1965.",
        ),
        _q(
            "How many islands make up New York City?",
            ["1", "3", "5", "Over 40"],
            3,
            "NYC sits on over 40 islands, including Manhattan, Staten Island, and Roosevelt Island.",
        ),
    ],
    "paris": [
        _q(
            "In what year was the Eiffel Tower completed?",
            ["1879", "1889", "1899", "1909"],
            1,
            "The tower was built for the 1889 World's Fair and was initially criticized by many Parisians.",
        ),
        _q(
            "How many artworks does the Louvre house?",
            ["38,000", "100,000", "280,000", "Over 380,000"],
            3,
            "It would take about 200 days to see every piece spending 30 seconds on each.",
        ),
        _q(
            "What river runs through Paris?",
            ["Rhine", "Loire", "Seine", "Danube"],
            2,
            "The Seine divides Paris into the Left Bank and Right Bank.",
        ),
        _q(
            "When did construction of Notre-Dame begin?",
            ["963 AD", "1063 AD", "1163 AD", "1263 AD"],
            2,
            "It took nearly 200 years to complete the cathedral.",
        ),
        _q(
            "What keeps Sacre-Coeur white?",
            ["Annual painting", "Calcite in the stone", "Marble cladding", "Regular bleaching"],
            1,
            "The stone exudes calcite when it rains, naturally whitening the basilica.",
        ),
        _q(
            "Who created the Jardin du Luxembourg?",
            ["Louis XIV", "Napoleon", "Marie de Medici", "Baron Haussmann"],
            2,
            "The gardens were inspired by the Boboli Gardens in Florence.",
        ),
        _q(
            "Which arrondissement is the Latin Quarter in?",
            ["1st", "5th", "10th", "16th"],
            1,
            "It is called the Latin Quarter because Latin was the language of learning there for centuries.",
        ),
        _q(
            "How tall is the Eiffel Tower?",
            ["224 meters", "270 meters", "330 meters", "400 meters"],
            2,
            "The tower grows about 15 cm taller in summer due to thermal expansion of the iron.",
        ),
    ],
    "rome": [
        _q(
            "How many spectators could the Colosseum hold?",
            ["25,000", "50,000", "80,000", "120,000"],
            1,
            "The Colosseum could even be flooded for mock naval battles.",
        ),
        _q(
            "Who painted the Sistine Chapel ceiling?",
            ["Leonardo da Vinci", "Raphael", "Michelangelo", "Caravaggio"],
            2,
            "Michelangelo painted it while standing, not lying on his back as commonly believed.",
        ),
        _q(
            "How much money is thrown into the Trevi Fountain daily?",
            ["About 300 euros", "About 1,000 euros", "About 3,000 euros", "About 10,000 euros"],
            2,
            "The collected coins are donated to Caritas, a Catholic charity.",
        ),
        _q(
            "What is the hole at the top of the Pantheon called?",
            ["Cupola", "Oculus", "Rotunda", "Atrium"],
            1,
            "The oculus is the Pantheon's only source of natural light and lets in rain and sunlight.",
        ),
        _q(
            "What does 'Trastevere' mean?",
            ["Old town", "Beyond the Tiber", "Holy ground", "Market place"],
            1,
            "Trastevere was historically home to Rome's working class.",
        ),
        _q(
            "How old is the Pantheon approximately?",
            ["1,000 years", "1,500 years", "2,000 years", "2,500 years"],
            2,
            "It has the world's largest unreinforced concrete dome, a feat of ancient engineering.",
        ),
        _q(
            "Which hill is NOT one of the seven hills of Rome?",
            ["Palatine", "Aventine", "Capitoline", "Vatican"],
            3,
            "Vatican Hill is west of the Tiber and was not part of the original seven hills.",
        ),
        _q(
            "What is a traditional Roman pasta dish?",
            ["Pesto Genovese", "Cacio e Pepe", "Bolognese", "Puttanesca"],
            1,
            "Cacio e Pepe means 'cheese and pepper' and uses just three ingredients.",
        ),
    ],
    "tokyo": [
        _q(
            "How old is Senso-ji Temple?",
            ["About 500 years", "About 900 years", "About 1,400 years", "About 2,000 years"],
            2,
            "Senso-ji was founded in 645 AD, making it Tokyo's oldest temple.",
        ),
        _q(
            "How many trees are in Meiji Shrine's forest?",
            ["10,000", "50,000", "120,000", "300,000"],
            2,
            "All 120,000 trees were donated from across Japan when the shrine was built.",
        ),
        _q(
            "How many people cross Shibuya Crossing at once?",
            ["500", "1,000", "3,000", "5,000"],
            2,
            "It is often called 'The Scramble' and is one of the most filmed locations in the world.",
        ),
        _q(
            "What was the original name of Tokyo?",
            ["Osaka", "Kyoto", "Edo", "Nara"],
            2,
            "Edo was renamed Tokyo, meaning 'Eastern Capital,' in 1868.",
        ),
        _q(
            "Why is Tokyo Tower painted orange and white?",
            ["Cultural tradition", "Aviation safety", "Imperial decree", "Artistic choice"],
            1,
            "The colors comply with international aviation safety regulations.",
        ),
        _q(
            "When did Shinjuku Gyoen open to the public?",
            ["1889", "1919", "1949", "1969"],
            2,
            "It was originally a private garden for the Imperial family.",
        ),
        _q(
            "What is the busiest train station in the world?",
            ["Tokyo Station", "Shibuya Station", "Shinjuku Station", "Ikebukuro Station"],
            2,
            "Shinjuku Station handles over 3.5 million passengers daily.",
        ),
        _q(
            "Which traditional market moved to Toyosu?",
            ["Ameyoko", "Tsukiji inner market", "Nakamise", "Omotesando"],
            1,
            "The outer market at Tsukiji still operates with over 400 shops.",
        ),
    ],
    "chicago": [
        _q(
            "What is Cloud Gate commonly known as?",
            ["The Mirror", "The Bean", "The Drop", "The Orb"],
            1,
            "Cloud Gate is made of 168 stainless steel plates welded together with no visible seams.",
        ),
        _q(
            "When was Willis Tower the world's tallest building?",
            ["1963-1988", "1973-1998", "1983-2008", "1993-2010"],
            1,
            "Willis Tower held the record for 25 years until the Petronas Towers surpassed it.",
        ),
        _q(
            "What color is the Chicago River dyed on St. Patrick's Day?",
            ["Blue", "Orange", "Green", "Gold"],
            2,
            "The tradition of dyeing the river green has been going on since 1962.",
        ),
        _q(
            "What style of pizza is Chicago famous for?",
            ["Thin crust", "Deep dish", "Neapolitan", "Flatbread"],
            1,
            "Deep dish pizza was invented at Pizzeria Uno in Chicago in 1943.",
        ),
        _q(
            "When was Navy Pier originally built?",
            ["1896", "1906", "1916", "1926"],
            2,
            "Navy Pier served as a Navy training center during World War II.",
        ),
        _q(
            "What is Chicago's nickname?",
            ["The Big Apple", "The Windy City", "Motor City", "The Gateway"],
            1,
            "The nickname may refer to boastful politicians rather than actual wind.",
        ),
        _q(
            "Which famous architect designed many buildings in Chicago?",
            ["Frank Gehry", "Frank Lloyd Wright", "I.M. Pei", "Zaha Hadid"],
            1,
            "Wright's Home and Studio in Oak Park is one of Chicago's most visited landmarks.",
        ),
        _q(
            "What body of water borders Chicago?",
            ["Lake Erie", "Lake Huron", "Lake Michigan", "Lake Superior"],
            2,
            "Chicago's lakefront trail stretches 18 miles along the shores of Lake Michigan.",
        ),
    ],
}


CURATED_PLACES: dict[str, list[Suggestion]] = {
    "new york": [
        _place(
            "Central Park",
            "An iconic 843-acre urban oasis in the heart of Manhattan, perfect for walks, boat rides, and people-watching.",
            Category.NATURE,
            "Central Park was the first public park in America, designed by Olmsted and Vaux in 1858.",
            "Central Park, New York, NY",
            40.7829,
            -73.9654,
        ),
        _place(
            "The Metropolitan Museum of Art",
            "One of the world's largest art museums with over 2 million works spanning 5,000 years of history.",
            Category.CULTURE,
            "The Met's collection includes an entire Egyptian temple, the Temple of Dendur.",
            "1000 5th Ave, New York, NY 10028",
            40.7794,
            -73.9632,
        ),
        _place(
            "Statue of Liberty",
            "A colossal neoclassical sculpture on Liberty Island, a universal symbol of freedom and democracy.",
            Category.LANDMARK,
            "The Statue of Liberty was a gift from France, dedicated in 1886.",
            "Liberty Island, New York, NY 10004",
            40.6892,
            -74.0445,
        ),
        _place(
            "Times Square",
            "The dazzling commercial intersection known for its bright lights, Broadway theaters, and vibrant energy.",
            Category.ENTERTAINMENT,
            "Times Square was originally called Longacre Square before being renamed in 1904.",
            "Manhattan, NY 10036",
            40.758,
            -73.9855,
        ),
        _place(
            "Brooklyn Bridge",
            "A historic suspension bridge connecting Manhattan and Brooklyn with stunning skyline views.",
            Category.LANDMARK,
            "When completed in 1883, the Brooklyn Bridge was the longest suspension bridge in the world.",
            "Brooklyn Bridge, New York, NY 10038",
            40.7061,
            -73.9969,
        ),
        _place(
            "Joe's Pizza",
            "A legendary Greenwich Village pizza spot serving classic New York slices since 1975.",
            Category.FOOD,
            "Joe's Pizza gained extra fame after appearing in Spider-Man 2.",
            "7 Carmine St, New York, NY 10014",
            40.7306,
            -74.0021,
        ),
    ],
    "chicago": [
        _place(
            "Millennium Park",
            "A stunning lakefront park featuring Cloud Gate (The Bean), Crown Fountain, and beautiful gardens.",
            Category.LANDMARK,
            "Cloud Gate is made of 168 stainless steel plates welded together with no visible seams.",
            "201 E Randolph St, Chicago, IL 60602",
            41.8827,
            -87.6233,
        ),
        _place(
            "Art Institute of Chicago",
            "One of the oldest and largest art museums in the United States, home to iconic Impressionist works.",
            Category.CULTURE,
            "The museum's collection includes Grant Wood's American Gothic and Seurat's A Sunday on La Grande Jatte.",
            "111 S Michigan Ave, Chicago, IL 60603",
            41.8796,
            -87.6237,
        ),
        _place(
            "Willis Tower Skydeck",
            "Offers breathtaking views from 1,353 feet up, including the famous glass-floor Ledge experience.",
            Category.LANDMARK,
            "Willis Tower was the tallest building in the world from 1973 to 1998.",
            "233 S Wacker Dr, Chicago, IL 60606",
            41.8789,
            -87.6359,
        ),
        _place(
            "Navy Pier",
            "A 3,300-foot pier on Lake Michigan featuring rides, restaurants, shops, and stunning lakefront views.",
            Category.ENTERTAINMENT,
            "Navy Pier was originally built in 1916 and served as a Navy training center during WWII.",
            "600 E Grand Ave, Chicago, IL 60611",
            41.8917,
            -87.6086,
        ),
        _place(
            "Chicago Riverwalk",
            "A pedestrian waterfront path along the Chicago River with dining, kayaking, and architectural views.",
            Category.NATURE,
            "The Chicago River is famously dyed green every St. Patrick's Day.",
            "Chicago Riverwalk, Chicago, IL",
            41.8882,
            -87.6198,
        ),
        _place(
            "Lou Malnati's Pizzeria",
            "Iconic deep-dish pizza destination that has been a Chicago institution since 1971.",
            Category.FOOD,
            "Lou Malnati's uses a butter crust recipe that has remained unchanged since opening.",
            "439 N Wells St, Chicago, IL 60654",
            41.8905,
            -87.6340,
        ),
    ],
    "paris": [
        _place(
            "Eiffel Tower",
            "The iconic iron lattice tower offering panoramic views of Paris from three observation levels.",
            Category.LANDMARK,
            "The Eiffel Tower was originally intended to be dismantled after 20 years.",
            "Champ de Mars, 5 Av. Anatole France, 75007 Paris",
            48.8584,
            2.2945,
        ),
        _place(
            "Louvre Museum",
            "The world's largest art museum, home to the Mona Lisa and over 380,000 objects.",
            Category.CULTURE,
            "It would take 200 days to see every piece in the Louvre if you spent 30 seconds on each.",
            "Rue de Rivoli, 75001 Paris",
            48.8606,
            2.3376,
        ),
        _place(
            "Notre-Dame Cathedral",
            "A medieval Catholic cathedral known for its French Gothic architecture and stunning rose windows.",
            Category.LANDMARK,
            "Construction of Notre-Dame began in 1163 and took nearly 200 years to complete.",
            "6 Parvis Notre-Dame, 75004 Paris",
            48.853,
            2.3499,
        ),
        _place(
            "Sacre-Coeur Basilica",
            "A stunning white-domed basilica atop Montmartre hill with sweeping views of the city.",
            Category.LANDMARK,
            "Sacre-Coeur's stone exudes calcite when it rains, keeping the basilica perpetually white.",
            "35 Rue du Chevalier de la Barre, 75018 Paris",
            48.8867,
            2.3431,
        ),
        _place(
            "Jardin du Luxembourg",
            "Beautiful formal gardens perfect for leisurely strolls, with fountains, statues, and a palace.",
            Category.NATURE,
            "The gardens were created in 1612 by Marie de Medici, inspired by the Boboli Gardens in Florence.",
            "Rue de Medicis, 75006 Paris",
            48.8462,
            2.3372,
        ),
        _place(
            "Le Comptoir du Pantheon",
            "A charming Parisian brasserie near the Pantheon serving classic French cuisine.",
            Category.FOOD,
            "The Latin Quarter where this restaurant sits has been the center of Parisian academic life since the Middle Ages.",
            "5 Rue Soufflot, 75005 Paris",
            48.8463,
            2.3461,
        ),
    ],
    "rome": [
        _place(
            "Colosseum",
            "The largest ancient amphitheater ever built, once hosting gladiatorial contests for 50,000 spectators.",
            Category.LANDMARK,
            "The Colosseum could be filled with water for mock naval battles called naumachiae.",
            "Piazza del Colosseo, 1, 00184 Roma",
            41.8902,
            12.4922,
        ),
        _place(
            "Vatican Museums",
            "A vast collection of art and historical artifacts, culminating in the breathtaking Sistine Chapel.",
            Category.CULTURE,
            "Michelangelo painted the Sistine Chapel ceiling while standing, not lying on his back.",
            "Viale Vaticano, 00165 Roma",
            41.9065,
            12.4536,
        ),
        _place(
            "Trevi Fountain",
            "Rome's most famous baroque fountain where visitors toss coins to ensure a return to the city.",
            Category.LANDMARK,
            "About 3,000 euros are thrown into the Trevi Fountain every day.",
            "Piazza di Trevi, 00187 Roma",
            41.9009,
            12.4833,
        ),
        _place(
            "Pantheon",
            "A remarkably preserved 2,000-year-old Roman temple with the world's largest unreinforced concrete dome.",
            Category.LANDMARK,
            "The Pantheon's dome has an open hole (oculus) at the top that lets in rain and sunlight.",
            "Piazza della Rotonda, 00186 Roma",
            41.8986,
            12.4769,
        ),
        _place(
            "Trastevere",
            "A charming medieval neighborhood with cobblestone streets, authentic trattorias, and vibrant nightlife.",
            Category.FOOD,
            "Trastevere means 'beyond the Tiber' and was historically home to Rome's working class.",
            "Trastevere, Roma",
            41.8869,
            12.4693,
        ),
        _place(
            "Villa Borghese Gardens",
            "Rome's third-largest public park with museums, a lake, and beautiful landscaped gardens.",
            Category.NATURE,
            "The park contains the Borghese Gallery, which houses works by Bernini, Caravaggio, and Raphael.",
            "Piazzale Napoleone I, 00197 Roma",
            41.9142,
            12.4853,
        ),
    ],
    "tokyo": [
        _place(
            "Senso-ji Temple",
            "Tokyo's oldest and most significant Buddhist temple, located in the colorful Asakusa district.",
            Category.CULTURE,
            "Senso-ji was founded in 645 AD, making it nearly 1,400 years old.",
            "2 Chome-3-1 Asakusa, Taito City, Tokyo 111-0032",
            35.7148,
            139.7967,
        ),
        _place(
            "Meiji Shrine",
            "A serene Shinto shrine surrounded by a lush forest, dedicated to Emperor Meiji and Empress Shoken.",
            Category.CULTURE,
            "The shrine's forest contains 120,000 trees donated from all over Japan.",
            "1-1 Yoyogikamizonocho, Shibuya City, Tokyo 151-8557",
            35.6764,
            139.6993,
        ),
        _place(
            "Shibuya Crossing",
            "The world's busiest pedestrian crossing, where up to 3,000 people cross simultaneously.",
            Category.LANDMARK,
            "Shibuya Crossing is often called 'The Scramble' and appears in countless films.",
            "Shibuya, Tokyo 150-0041",
            35.6595,
            139.7004,
        ),
        _place(
            "Tsukiji Outer Market",
            "A bustling marketplace offering the freshest sushi, street food, and Japanese culinary delights.",
            Category.FOOD,
            "While the inner wholesale market moved to Toyosu, the outer market retains over 400 shops.",
            "4 Chome-16-2 Tsukiji, Chuo City, Tokyo 104-0045",
            35.6654,
            139.7707,
        ),
        _place(
            "Shinjuku Gyoen",
            "A spacious national garden blending Japanese, English, and French landscaping styles.",
            Category.NATURE,
            "Shinjuku Gyoen was originally a private garden for the Imperial family before opening to the public in 1949.",
            "11 Naitomachi, Shinjuku City, Tokyo 160-0014",
            35.6852,
            139.71,
        ),
        _place(
            "Tokyo Tower",
            "An iconic communications and observation tower inspired by the Eiffel Tower, with sweeping city views.",
            Category.LANDMARK,
            "Tokyo Tower is painted in white and international orange to comply with aviation safety regulations.",
            "4 Chome-2-8 Shibakoen, Minato City, Tokyo 105-0011",
            35.6586,
            139.7454,
        ),
    ],
}
