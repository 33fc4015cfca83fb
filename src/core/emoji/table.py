"""Bundled emoji table: (glyph, aliases, description).

Aliases follow GitHub's shortcode names. Order is the picker order.
"""

from __future__ import annotations

EMOJI_TABLE: tuple[tuple[str, tuple[str, ...], str], ...] = (
    # Smileys
    ("😀", ("grinning",), "grinning face"),
    ("😃", ("smiley",), "grinning face with big eyes"),
    ("😄", ("smile",), "grinning face with smiling eyes"),
    ("😁", ("grin",), "beaming face with smiling eyes"),
    ("😆", ("laughing", "satisfied"), "grinning squinting face"),
    ("😅", ("sweat_smile",), "grinning face with sweat"),
    ("🤣", ("rofl",), "rolling on the floor laughing"),
    ("😂", ("joy",), "face with tears of joy"),
    ("🙂", ("slightly_smiling_face",), "slightly smiling face"),
    ("🙃", ("upside_down_face",), "upside-down face"),
    ("😉", ("wink",), "winking face"),
    ("😊", ("blush",), "smiling face with smiling eyes"),
    ("😇", ("innocent",), "smiling face with halo"),
    ("🥰", ("smiling_face_with_three_hearts",), "smiling face with hearts"),
    ("😍", ("heart_eyes",), "smiling face with heart-eyes"),
    ("🤩", ("star_struck",), "star-struck"),
    ("😘", ("kissing_heart",), "face blowing a kiss"),
    ("😋", ("yum",), "face savoring food"),
    ("😛", ("stuck_out_tongue",), "face with tongue"),
    ("😜", ("stuck_out_tongue_winking_eye",), "winking face with tongue"),
    ("🤪", ("zany_face",), "zany face"),
    ("🤑", ("money_mouth_face",), "money-mouth face"),
    ("🤗", ("hugs",), "hugging face"),
    ("🤭", ("hand_over_mouth",), "face with hand over mouth"),
    ("🤫", ("shushing_face",), "shushing face"),
    ("🤔", ("thinking",), "thinking face"),
    ("🤐", ("zipper_mouth_face",), "zipper-mouth face"),
    ("🤨", ("raised_eyebrow",), "face with raised eyebrow"),
    ("😐", ("neutral_face",), "neutral face"),
    ("😑", ("expressionless",), "expressionless face"),
    ("😶", ("no_mouth",), "face without mouth"),
    ("😏", ("smirk",), "smirking face"),
    ("😒", ("unamused",), "unamused face"),
    ("🙄", ("roll_eyes",), "face with rolling eyes"),
    ("😬", ("grimacing",), "grimacing face"),
    ("🤥", ("lying_face",), "lying face"),
    ("😌", ("relieved",), "relieved face"),
    ("😔", ("pensive",), "pensive face"),
    ("😪", ("sleepy",), "sleepy face"),
    ("🤤", ("drooling_face",), "drooling face"),
    ("😴", ("sleeping",), "sleeping face"),
    ("😷", ("mask",), "face with medical mask"),
    ("🤒", ("face_with_thermometer",), "face with thermometer"),
    ("🤕", ("face_with_head_bandage",), "face with head-bandage"),
    ("🤢", ("nauseated_face",), "nauseated face"),
    ("🤮", ("vomiting_face",), "face vomiting"),
    ("🤧", ("sneezing_face",), "sneezing face"),
    ("🥵", ("hot_face",), "hot face"),
    ("🥶", ("cold_face",), "cold face"),
    ("🥴", ("woozy_face",), "woozy face"),
    ("😵", ("dizzy_face",), "dizzy face"),
    ("🤯", ("exploding_head",), "exploding head"),
    ("🤠", ("cowboy_hat_face",), "cowboy hat face"),
    ("🥳", ("partying_face",), "partying face"),
    ("😎", ("sunglasses",), "smiling face with sunglasses"),
    ("🤓", ("nerd_face",), "nerd face"),
    ("🧐", ("monocle_face",), "face with monocle"),
    ("😕", ("confused",), "confused face"),
    ("😟", ("worried",), "worried face"),
    ("🙁", ("slightly_frowning_face",), "slightly frowning face"),
    ("😮", ("open_mouth",), "face with open mouth"),
    ("😯", ("hushed",), "hushed face"),
    ("😲", ("astonished",), "astonished face"),
    ("😳", ("flushed",), "flushed face"),
    ("🥺", ("pleading_face",), "pleading face"),
    ("😦", ("frowning",), "frowning face with open mouth"),
    ("😨", ("fearful",), "fearful face"),
    ("😰", ("cold_sweat",), "anxious face with sweat"),
    ("😢", ("cry",), "crying face"),
    ("😭", ("sob",), "loudly crying face"),
    ("😱", ("scream",), "face screaming in fear"),
    ("😖", ("confounded",), "confounded face"),
    ("😣", ("persevere",), "persevering face"),
    ("😞", ("disappointed",), "disappointed face"),
    ("😓", ("sweat",), "downcast face with sweat"),
    ("😩", ("weary",), "weary face"),
    ("😫", ("tired_face",), "tired face"),
    ("🥱", ("yawning_face",), "yawning face"),
    ("😤", ("triumph",), "face with steam from nose"),
    ("😡", ("rage", "pout"), "pouting face"),
    ("😠", ("angry",), "angry face"),
    ("🤬", ("cursing_face",), "face with symbols on mouth"),
    ("😈", ("smiling_imp",), "smiling face with horns"),
    ("💀", ("skull",), "skull"),
    ("💩", ("hankey", "poop", "shit"), "pile of poo"),
    ("🤡", ("clown_face",), "clown face"),
    ("👻", ("ghost",), "ghost"),
    ("👽", ("alien",), "alien"),
    ("🤖", ("robot",), "robot"),
    ("😺", ("smiley_cat",), "grinning cat"),
    ("🙈", ("see_no_evil",), "see-no-evil monkey"),
    ("🙉", ("hear_no_evil",), "hear-no-evil monkey"),
    ("🙊", ("speak_no_evil",), "speak-no-evil monkey"),
    # Hearts and symbols
    ("💯", ("100",), "hundred points"),
    ("💢", ("anger",), "anger symbol"),
    ("💥", ("boom", "collision"), "collision"),
    ("💫", ("dizzy",), "dizzy"),
    ("💦", ("sweat_drops",), "sweat droplets"),
    ("💨", ("dash",), "dashing away"),
    ("💬", ("speech_balloon",), "speech balloon"),
    ("💭", ("thought_balloon",), "thought balloon"),
    ("💤", ("zzz",), "zzz"),
    ("❤️", ("heart",), "red heart"),
    ("🧡", ("orange_heart",), "orange heart"),
    ("💛", ("yellow_heart",), "yellow heart"),
    ("💚", ("green_heart",), "green heart"),
    ("💙", ("blue_heart",), "blue heart"),
    ("💜", ("purple_heart",), "purple heart"),
    ("🖤", ("black_heart",), "black heart"),
    ("💔", ("broken_heart",), "broken heart"),
    ("💖", ("sparkling_heart",), "sparkling heart"),
    # People and hands
    ("👋", ("wave",), "waving hand"),
    ("🤚", ("raised_back_of_hand",), "raised back of hand"),
    ("✋", ("hand", "raised_hand"), "raised hand"),
    ("🖖", ("vulcan_salute",), "vulcan salute"),
    ("👌", ("ok_hand",), "OK hand"),
    ("🤞", ("crossed_fingers",), "crossed fingers"),
    ("✌️", ("v",), "victory hand"),
    ("🤘", ("metal",), "sign of the horns"),
    ("👈", ("point_left",), "backhand index pointing left"),
    ("👉", ("point_right",), "backhand index pointing right"),
    ("👆", ("point_up_2",), "backhand index pointing up"),
    ("👇", ("point_down",), "backhand index pointing down"),
    ("👍", ("+1", "thumbsup"), "thumbs up"),
    ("👎", ("-1", "thumbsdown"), "thumbs down"),
    ("✊", ("fist_raised", "fist"), "raised fist"),
    ("👊", ("fist_oncoming", "facepunch", "punch"), "oncoming fist"),
    ("👏", ("clap",), "clapping hands"),
    ("🙌", ("raised_hands",), "raising hands"),
    ("👐", ("open_hands",), "open hands"),
    ("🤝", ("handshake",), "handshake"),
    ("🙏", ("pray",), "folded hands"),
    ("✍️", ("writing_hand",), "writing hand"),
    ("💪", ("muscle",), "flexed biceps"),
    ("🧠", ("brain",), "brain"),
    ("👀", ("eyes",), "eyes"),
    ("🤷", ("man_shrugging", "shrug"), "person shrugging"),
    ("🤦", ("facepalm",), "person facepalming"),
    ("🙋", ("raising_hand",), "person raising hand"),
    ("🧑‍💻", ("technologist",), "technologist"),
    ("🏃", ("runner", "running"), "person running"),
    ("🚶", ("walking",), "person walking"),
    ("🧘", ("person_in_lotus_position",), "person in lotus position"),
    ("🛌", ("sleeping_bed",), "person in bed"),
    # Animals and nature
    ("🐶", ("dog",), "dog face"),
    ("🐱", ("cat",), "cat face"),
    ("🦊", ("fox_face",), "fox"),
    ("🐻", ("bear",), "bear"),
    ("🐼", ("panda_face",), "panda"),
    ("🐨", ("koala",), "koala"),
    ("🦁", ("lion",), "lion"),
    ("🐸", ("frog",), "frog"),
    ("🐙", ("octopus",), "octopus"),
    ("🦈", ("shark",), "shark"),
    ("🐛", ("bug",), "bug"),
    ("🐝", ("bee", "honeybee"), "honeybee"),
    ("🐢", ("turtle",), "turtle"),
    ("🦥", ("sloth",), "sloth"),
    ("🦄", ("unicorn",), "unicorn"),
    ("🌱", ("seedling",), "seedling"),
    ("🌲", ("evergreen_tree",), "evergreen tree"),
    ("🌴", ("palm_tree",), "palm tree"),
    ("🌵", ("cactus",), "cactus"),
    ("🍀", ("four_leaf_clover",), "four leaf clover"),
    ("🌸", ("cherry_blossom",), "cherry blossom"),
    ("🌻", ("sunflower",), "sunflower"),
    ("🌈", ("rainbow",), "rainbow"),
    ("☀️", ("sunny",), "sun"),
    ("🌤️", ("sun_behind_small_cloud",), "sun behind small cloud"),
    ("☁️", ("cloud",), "cloud"),
    ("🌧️", ("cloud_with_rain",), "cloud with rain"),
    ("⛈️", ("cloud_with_lightning_and_rain",), "cloud with lightning and rain"),
    ("❄️", ("snowflake",), "snowflake"),
    ("⛄", ("snowman",), "snowman without snow"),
    ("⚡", ("zap",), "high voltage"),
    ("🔥", ("fire",), "fire"),
    ("💧", ("droplet",), "droplet"),
    ("🌊", ("ocean",), "water wave"),
    ("🌙", ("crescent_moon",), "crescent moon"),
    ("⭐", ("star",), "star"),
    ("🌟", ("star2",), "glowing star"),
    ("✨", ("sparkles",), "sparkles"),
    ("🌍", ("earth_africa",), "globe showing Europe-Africa"),
    ("🌎", ("earth_americas",), "globe showing Americas"),
    ("🌏", ("earth_asia",), "globe showing Asia-Australia"),
    ("🌅", ("sunrise",), "sunrise"),
    # Food and drink
    ("🍎", ("apple",), "red apple"),
    ("🍕", ("pizza",), "pizza"),
    ("🍔", ("hamburger",), "hamburger"),
    ("🌮", ("taco",), "taco"),
    ("🍜", ("ramen",), "steaming bowl"),
    ("🍣", ("sushi",), "sushi"),
    ("🍩", ("doughnut",), "doughnut"),
    ("🍪", ("cookie",), "cookie"),
    ("🎂", ("birthday",), "birthday cake"),
    ("🍰", ("cake",), "shortcake"),
    ("☕", ("coffee",), "hot beverage"),
    ("🍵", ("tea",), "teacup without handle"),
    ("🍺", ("beer",), "beer mug"),
    ("🍻", ("beers",), "clinking beer mugs"),
    ("🍷", ("wine_glass",), "wine glass"),
    ("🍽️", ("plate_with_cutlery",), "fork and knife with plate"),
    # Activities and celebration
    ("🎃", ("jack_o_lantern",), "jack-o-lantern"),
    ("🎄", ("christmas_tree",), "Christmas tree"),
    ("🎆", ("fireworks",), "fireworks"),
    ("🎈", ("balloon",), "balloon"),
    ("🎉", ("tada",), "party popper"),
    ("🎊", ("confetti_ball",), "confetti ball"),
    ("🎁", ("gift",), "wrapped gift"),
    ("🏆", ("trophy",), "trophy"),
    ("🏅", ("medal_sports",), "sports medal"),
    ("⚽", ("soccer",), "soccer ball"),
    ("🏀", ("basketball",), "basketball"),
    ("🎾", ("tennis",), "tennis"),
    ("🎮", ("video_game",), "video game"),
    ("🎲", ("game_die",), "game die"),
    ("🧩", ("jigsaw",), "puzzle piece"),
    ("🎨", ("art",), "artist palette"),
    ("🎧", ("headphones",), "headphone"),
    ("🎤", ("microphone",), "microphone"),
    ("🎸", ("guitar",), "guitar"),
    ("🎵", ("musical_note",), "musical note"),
    ("🎶", ("notes",), "musical notes"),
    ("🎬", ("clapper",), "clapper board"),
    ("🎯", ("dart",), "direct hit"),
    # Travel and places
    ("🚀", ("rocket",), "rocket"),
    ("✈️", ("airplane",), "airplane"),
    ("🚗", ("car", "red_car"), "automobile"),
    ("🚲", ("bike",), "bicycle"),
    ("🚂", ("steam_locomotive",), "locomotive"),
    ("🚢", ("ship",), "ship"),
    ("⛵", ("boat", "sailboat"), "sailboat"),
    ("🚧", ("construction",), "construction"),
    ("🚨", ("rotating_light",), "police car light"),
    ("🏠", ("house",), "house"),
    ("🏡", ("house_with_garden",), "house with garden"),
    ("🏢", ("office",), "office building"),
    ("🏥", ("hospital",), "hospital"),
    ("🏫", ("school",), "school"),
    ("🏖️", ("beach_umbrella",), "beach with umbrella"),
    ("🏝️", ("desert_island",), "desert island"),
    ("⛰️", ("mountain",), "mountain"),
    ("🏕️", ("camping",), "camping"),
    ("🗺️", ("world_map",), "world map"),
    ("🧳", ("luggage",), "luggage"),
    # Objects
    ("⌛", ("hourglass",), "hourglass done"),
    ("⏳", ("hourglass_flowing_sand",), "hourglass not done"),
    ("⌚", ("watch",), "watch"),
    ("⏰", ("alarm_clock",), "alarm clock"),
    ("⏱️", ("stopwatch",), "stopwatch"),
    ("📅", ("date",), "calendar"),
    ("📆", ("calendar",), "tear-off calendar"),
    ("📌", ("pushpin",), "pushpin"),
    ("📎", ("paperclip",), "paperclip"),
    ("✏️", ("pencil2",), "pencil"),
    ("📝", ("memo", "pencil"), "memo"),
    ("📖", ("book", "open_book"), "open book"),
    ("📚", ("books",), "books"),
    ("📦", ("package",), "package"),
    ("📫", ("mailbox",), "closed mailbox with raised flag"),
    ("📧", ("e-mail",), "e-mail"),
    ("📣", ("mega",), "megaphone"),
    ("📢", ("loudspeaker",), "loudspeaker"),
    ("🔔", ("bell",), "bell"),
    ("🔕", ("no_bell",), "bell with slash"),
    ("📱", ("iphone",), "mobile phone"),
    ("☎️", ("phone", "telephone"), "telephone"),
    ("📞", ("telephone_receiver",), "telephone receiver"),
    ("💻", ("computer",), "laptop"),
    ("🖥️", ("desktop_computer",), "desktop computer"),
    ("⌨️", ("keyboard",), "keyboard"),
    ("🖱️", ("computer_mouse",), "computer mouse"),
    ("💾", ("floppy_disk",), "floppy disk"),
    ("💿", ("cd",), "optical disk"),
    ("📷", ("camera",), "camera"),
    ("🎥", ("movie_camera",), "movie camera"),
    ("📺", ("tv",), "television"),
    ("📻", ("radio",), "radio"),
    ("🔋", ("battery",), "battery"),
    ("🔌", ("electric_plug",), "electric plug"),
    ("💡", ("bulb",), "light bulb"),
    ("🔦", ("flashlight",), "flashlight"),
    ("🔍", ("mag",), "magnifying glass tilted left"),
    ("🔬", ("microscope",), "microscope"),
    ("🔭", ("telescope",), "telescope"),
    ("📡", ("satellite",), "satellite antenna"),
    ("🔒", ("lock",), "locked"),
    ("🔓", ("unlock",), "unlocked"),
    ("🔑", ("key",), "key"),
    ("🔨", ("hammer",), "hammer"),
    ("🛠️", ("hammer_and_wrench",), "hammer and wrench"),
    ("🔧", ("wrench",), "wrench"),
    ("🔩", ("nut_and_bolt",), "nut and bolt"),
    ("⚙️", ("gear",), "gear"),
    ("🧪", ("test_tube",), "test tube"),
    ("🧰", ("toolbox",), "toolbox"),
    ("🧹", ("broom",), "broom"),
    ("💊", ("pill",), "pill"),
    ("💉", ("syringe",), "syringe"),
    ("🔮", ("crystal_ball",), "crystal ball"),
    ("💰", ("moneybag",), "money bag"),
    ("💸", ("money_with_wings",), "money with wings"),
    ("📈", ("chart_with_upwards_trend",), "chart increasing"),
    ("📉", ("chart_with_downwards_trend",), "chart decreasing"),
    ("📊", ("bar_chart",), "bar chart"),
    ("📋", ("clipboard",), "clipboard"),
    ("🗓️", ("spiral_calendar",), "spiral calendar"),
    ("🗑️", ("wastebasket",), "wastebasket"),
    ("🏗️", ("building_construction",), "building construction"),
    ("🎓", ("mortar_board",), "graduation cap"),
    ("👑", ("crown",), "crown"),
    ("🎩", ("tophat",), "top hat"),
    ("🕶️", ("dark_sunglasses",), "sunglasses"),
    # Status symbols
    ("✅", ("white_check_mark",), "check mark button"),
    ("✔️", ("heavy_check_mark",), "check mark"),
    ("❌", ("x",), "cross mark"),
    ("❎", ("negative_squared_cross_mark",), "cross mark button"),
    ("❓", ("question",), "question mark"),
    ("❗", ("exclamation", "heavy_exclamation_mark"), "exclamation mark"),
    ("‼️", ("bangbang",), "double exclamation mark"),
    ("⚠️", ("warning",), "warning"),
    ("⛔", ("no_entry",), "no entry"),
    ("🚫", ("no_entry_sign",), "prohibited"),
    ("🛑", ("stop_sign",), "stop sign"),
    ("🔴", ("red_circle",), "red circle"),
    ("🟠", ("orange_circle",), "orange circle"),
    ("🟡", ("yellow_circle",), "yellow circle"),
    ("🟢", ("green_circle",), "green circle"),
    ("🔵", ("large_blue_circle",), "blue circle"),
    ("⚪", ("white_circle",), "white circle"),
    ("⚫", ("black_circle",), "black circle"),
    ("♻️", ("recycle",), "recycling symbol"),
    ("🔄", ("arrows_counterclockwise",), "counterclockwise arrows button"),
    ("🔁", ("repeat",), "repeat button"),
    ("➕", ("heavy_plus_sign",), "plus"),
    ("➖", ("heavy_minus_sign",), "minus"),
    ("🆗", ("ok",), "OK button"),
    ("🆕", ("new",), "NEW button"),
    ("🆓", ("free",), "FREE button"),
    ("🆒", ("cool",), "COOL button"),
    ("🆙", ("up",), "UP! button"),
    ("🆘", ("sos",), "SOS button"),
    ("🔝", ("top",), "TOP arrow"),
    ("🔜", ("soon",), "SOON arrow"),
    ("🔙", ("back",), "BACK arrow"),
    ("🔚", ("end",), "END arrow"),
    ("🔛", ("on",), "ON! arrow"),
    ("🅰️", ("a",), "A button (blood type)"),
    ("🅱️", ("b",), "B button (blood type)"),
    ("🔢", ("1234",), "input numbers"),
    ("ℹ️", ("information_source",), "information"),
    ("🏁", ("checkered_flag",), "chequered flag"),
    ("🚩", ("triangular_flag_on_post",), "triangular flag"),
    ("🏳️", ("white_flag",), "white flag"),
    ("🏴‍☠️", ("pirate_flag",), "pirate flag"),
    ("🔗", ("link",), "link"),
    ("🧵", ("thread",), "thread"),
    ("🏷️", ("label",), "label"),
    ("🔖", ("bookmark",), "bookmark"),
    ("🧑‍🏫", ("teacher",), "teacher"),
    ("👶", ("baby",), "baby"),
    ("🍼", ("baby_bottle",), "baby bottle"),
    ("🐧", ("penguin",), "penguin"),
    ("🐳", ("whale",), "spouting whale"),
    ("🐍", ("snake",), "snake"),
    ("🦀", ("crab",), "crab"),
    ("🐹", ("hamster",), "hamster"),
    ("🦉", ("owl",), "owl"),
    ("🦋", ("butterfly",), "butterfly"),
)
