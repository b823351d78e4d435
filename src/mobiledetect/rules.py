"""
mobiledetect.rules
~~~~~~~~~~~~~~~~~~

The detection rules: named regular expressions grouped into phones,
tablets, operating systems, browsers and utilities, plus the patterns
used to pull version numbers out of a User-Agent.

The table is plain data.  It is compiled once into a :class:`RuleTable`
when this module is imported (:data:`DEFAULT_RULE_TABLE`) and shared by
reference between all detectors.  Rules are matched case sensitively
with :func:`re.search`; version patterns are matched case insensitively.

The operating system and browser rules only describe mobile platforms
(``Chrome`` is Chrome on Android or iOS, not on the desktop), so they
take part in :meth:`~mobiledetect.MobileDetect.is_mobile` together with
the phones and the tablets.
"""
from __future__ import annotations

import enum
import hashlib
import re
import typing as t

from .exceptions import UnknownPropertyError
from .exceptions import UnknownRuleError


class Category(enum.Enum):
    PHONE = "phone"
    TABLET = "tablet"
    OPERATING_SYSTEM = "os"
    BROWSER = "browser"
    UTILITY = "utility"


PHONE_DEVICES: t.Tuple[t.Tuple[str, str], ...] = (
    ("iPhone", r"\biPhone\b|\biPod\b"),
    (
        "BlackBerry",
        r"BlackBerry|\bBB10\b|rim[0-9]+|\b(BBA100|BBB100|BBD100|BBE100|BBF100"
        r"|STH100)\b-[0-9]+",
    ),
    ("Pixel", r"; \bPixel\b"),
    (
        "HTC",
        r"HTC|HTC.*(Sensation|Evo|Vision|Explorer|6800|8100|8900|A7272|S510e"
        r"|C110e|Legend|Desire|T8282)|APX515CKT|Qtek9090|APA9292KT|HD_mini"
        r"|Sensation.*Z710e|PG86100|Z715e|Desire.*(A8181|HD)|ADR6200|ADR6400L"
        r"|ADR6425|001HT|Inspire 4G|Android.*\bEVO\b|T-Mobile G1|Z520m",
    ),
    (
        "Nexus",
        r"Nexus One|Nexus S|Galaxy.*Nexus|Android.*Nexus.*Mobile|Nexus 4"
        r"|Nexus 5|Nexus 5X|Nexus 6",
    ),
    (
        "Dell",
        r"Dell[;]? (Streak|Aero|Venue|Venue Pro|Flash|Smoke|Mini 3iX)|XCD28"
        r"|XCD35|\b001DL\b|\b101DL\b|\bGS01\b",
    ),
    (
        "Motorola",
        r"Motorola|DROIDX|DROID BIONIC|\bDroid\b.*Build|Android.*Xoom|HRI39"
        r"|MOT-|A1260|A1680|A555|A853|A855|A953|A955|A956|Motorola.*ELECTRIFY"
        r"|Motorola.*i1|i867|i940|MB200|MB300|MB501|MB502|MB508|MB511|MB520"
        r"|MB525|MB526|MB611|MB612|MB632|MB810|MB855|MB860|MB861|MB865|MB870"
        r"|ME501|ME502|ME511|ME525|ME600|ME632|ME722|ME811|ME860|ME863|ME865"
        r"|MT620|MT710|MT716|MT720|MT810|MT870|MT917|Motorola.*TITANIUM"
        r"|WX435|WX445|XT3[0-9]{2}|XT5[0-9]{2}|XT6[0-9]{2}|XT7[0-9]{2}"
        r"|XT8[0-9]{2}|XT9[0-9]{2}|XT10[0-9]{2}|\bMoto E\b|\bmoto g\b",
    ),
    (
        "Samsung",
        r"\bSamsung\b|SAMSUNG|SGH-[A-Z]?[0-9]{3,4}|SCH-[A-Z]?[0-9]{3,4}"
        r"|SPH-[A-Z]?[0-9]{3,4}|GT-[BCEINS][0-9]{4}|SM-[AGJMNS][0-9]{3}"
        r"|SHV-E[0-9]{3}|SHW-M[0-9]{3}|SEC-SGH[0-9]+|SC-0[0-9][A-Z]",
    ),
    (
        "LG",
        r"\bLG\b;|LG[- ]?(C800|C900|E400|E610|E900|E-900|F160|F180K|F180L"
        r"|F180S|730|855|L160|LS740|LS840|LS970|LU6200|MS690|MS695|MS770"
        r"|MS840|MS870|MS910|P500|P700|P705|VM696|AS680|AS695|AX840|C729"
        r"|E970|GS505|272|C395|E739BK|E960|L55C|L75C|LS696|LS860|P769BK|P350"
        r"|P509|P870|UN272|US730|VS840|VS950|LN272|LN510|LS670|LS855|LW690"
        r"|MN270|MN510|P769|P930|UN200|UN270|UN510|UN610|US670|US740|US760"
        r"|UX265|UX840|VN271|VN530|VS660|VS700|VS740|VS750|VS910|VS920|VS930"
        r"|VX9200|VX11000|AX840A|LW770|P506|P925|P999|E612|D955|D802|MS323"
        r"|M257)|LM-G710",
    ),
    (
        "Sony",
        r"SonyST|SonyLT|SonyEricsson|SonyEricssonLT15iv|LT18i|E10i|LT28h"
        r"|LT26w|SonyEricssonMT27i|C5303|C6902|C6903|C6906|C6943|D2533"
        r"|SOV34|601SO|F8332",
    ),
    ("Asus", r"Asus.*Galaxy|PadFone.*Mobile"),
    (
        "Xiaomi",
        r"^(?!.*\bx11\b).*xiaomi.*$|POCOPHONE F1|\bMI\s+8\b|\bMI\s+8\s+SE\b"
        r"|Redmi Note [0-9]+|Redmi [0-9]+[A-Z]?|\bM20[0-9]{2}[A-Z0-9]+\b",
    ),
    ("NokiaLumia", r"Lumia [0-9]{3,4}"),
    (
        "Micromax",
        r"Micromax.*\b(A210|A92|A88|A72|A111|A110Q|A115|A116|A110|A90S|A26"
        r"|A51|A35|A54|A25|A27|A89|A68|A65|A57|A90)\b",
    ),
    ("Palm", r"PalmSource|Palm"),
    (
        "Vertu",
        r"Vertu|Vertu.*Ltd|Vertu.*Ascent|Vertu.*Ayxta|Vertu.*Constellation"
        r"(F|Quest)?|Vertu.*Monika|Vertu.*Signature",
    ),
    (
        "Pantech",
        r"PANTECH|IM-A850S|IM-A840S|IM-A830L|IM-A830K|IM-A830S|IM-A820L"
        r"|IM-A810K|IM-A810S|IM-A800S|IM-T100K|IM-A725L|IM-A780L|IM-A775C"
        r"|IM-A770K|IM-A760S|IM-A750K|IM-A740S|IM-A730S|IM-A720L|IM-A710K"
        r"|IM-A690L|IM-A690S|IM-A650S|IM-A630K|IM-A600S|VEGA PTL21|PT003"
        r"|P8010|ADR910L|P6030|P6020|P9070|P4100|P9060|P5000|CDM8992"
        r"|TXT8045|ADR8995|IS11PT|P2030|P6010|P8000|PT002|IS06|CDM8999"
        r"|P9050|PT001|TXT8040|P2020|P9020|P2000|P7040|P7000|C790",
    ),
    (
        "Fly",
        r"IQ230|IQ444|IQ450|IQ440|IQ442|IQ441|IQ245|IQ256|IQ236|IQ255|IQ235"
        r"|IQ245|IQ275|IQ240|IQ285|IQ280|IQ270|IQ260|IQ250",
    ),
    (
        "Wiko",
        r"KITE 4G|HIGHWAY|GETAWAY|STAIRWAY|DARKSIDE|DARKFULL|DARKNIGHT"
        r"|DARKMOON|SLIDE|WAX 4G|RAINBOW|BLOOM|SUNSET|GOA(?!nna)|LENNY|BARRY"
        r"|IGGY|OZZY|CINK FIVE|CINK PEAX|CINK PEAX 2|CINK SLIM|CINK SLIM 2"
        r"|CINK \+|CINK KING|SUBLIM",
    ),
    ("iMobile", r"i-mobile (IQ|i-STYLE|idea|ZAA|Hitz)"),
    (
        "SimValley",
        r"\b(SP-80|XT-930|SX-340|SX-310|SP-360|SP60|SPT-800|SP-120|SP-140"
        r"|SPX-5|SPX-8|SP-100|SPX-12)\b",
    ),
    (
        "Wolfgang",
        r"AT-B24D|AT-AS50HD|AT-AS40W|AT-AS55HD|AT-AS45q2|AT-B26D|AT-AS50Q",
    ),
    ("Alcatel", r"Alcatel"),
    ("Nintendo", r"Nintendo (3DS|Switch)"),
    ("Amoi", r"Amoi"),
    ("INQ", r"INQ"),
    ("OnePlus", r"ONEPLUS"),
    (
        "GenericPhone",
        r"Tapatalk|PDA;|SAGEM|\bmmp\b|pocket|\bpsp\b|symbian|Smartphone"
        r"|smartfon|treo|up\.browser|up\.link|vodafone|\bwap\b|nokia|Nokia"
        r"|Series40|Series60|S60|SonyEricsson|N900|MAUI.*WAP.*Browser",
    ),
)

TABLET_DEVICES: t.Tuple[t.Tuple[str, str], ...] = (
    ("iPad", r"iPad|iPad.*Mobile"),
    ("NexusTablet", r"Android.*Nexus[\s]+(7|9|10)"),
    ("GoogleTablet", r"Android.*Pixel C"),
    (
        "SamsungTablet",
        r"SAMSUNG.*Tablet|Galaxy.*Tab|SC-01C|GT-P[0-9]{4}|GT-N[58][0-9]{3}"
        r"|SGH-T849|SHW-M180S|SGH-I987|SPH-P100|SCH-I800|SM-T[0-9]{3}[A-Z]?"
        r"|SM-P[0-9]{3}|SM-X[0-9]{3}",
    ),
    (
        "Kindle",
        r"Kindle|Silk.*Accelerated|Android.*\b(KFOT|KFTT|KFJWI|KFJWA|KFOTE"
        r"|KFSOWI|KFTHWI|KFTHWA|KFAPWI|KFAPWA|WFJWAE|KFSAWA|KFSAWI|KFASWI"
        r"|KFARWI|KFFOWI|KFGIWI|KFMEWI)\b|Android.*Silk/[0-9.]+ like"
        r" Chrome/[0-9.]+ (?!Mobile)",
    ),
    ("SurfaceTablet", r"Windows NT [0-9.]+; ARM;.*(Tablet|ARMBJS)"),
    (
        "HPTablet",
        r"HP Slate (7|8|10)|HP ElitePad 900|hp-tablet|EliteBook.*Touch|HP 8"
        r"|Slate 21|HP SlateBook 10",
    ),
    (
        "AsusTablet",
        r"^.*PadFone((?!Mobile).)*$|Transformer|TF101|TF101G|TF300T|TF300TG"
        r"|TF300TL|TF700T|TF700KL|TF701T|TF810C|ME171|ME301T|ME302C|ME371MG"
        r"|ME370T|ME372MG|ME172V|ME173X|ME400C|Slider SL101|\bK00F\b|\bK00C\b"
        r"|\bK00E\b|\bK00L\b|TX201LA|ME176C|ME102A|\bM80TA\b|ME372CL|ME560CG"
        r"|ME372CG|ME302KL| K010 | K011 | K017 | K01E |ME572C|ME103K|ME170C"
        r"|ME171C|\bME70C\b|ME581C|ME581CL|ME8510C|ME181C|P01Y|PO1MA|P01Z"
        r"|\bP027\b|\bP024\b|\bP00C\b",
    ),
    ("BlackBerryTablet", r"PlayBook|RIM Tablet"),
    (
        "HTCtablet",
        r"HTC_Flyer_P512|HTC Flyer|HTC Jetstream|HTC-P715a|HTC EVO View 4G"
        r"|PG41200|PG09410",
    ),
    ("MotorolaTablet", r"Xoom|sholest|MZ6[01][0-9]|MZ505"),
    (
        "NookTablet",
        r"Android.*Nook|NookColor|nook browser|BNRV200|BNRV200A|BNTV250"
        r"|BNTV250A|BNTV400|BNTV600|LogicPD Zoom2",
    ),
    (
        "AcerTablet",
        r"Android.*; \b(A100|A101|A110|A200|A210|A211|A500|A501|A510|A511"
        r"|A700|A701|W500|W500P|W501|W501P|W510|W511|W700|G100|G100W|B1-A71"
        r"|B1-710|B1-711|A1-810|A1-811|A1-830)\b|W3-810|\bA3-A10\b|\bA3-A11\b"
        r"|\bA3-A20\b|\bA3-A30|A3-A40",
    ),
    (
        "ToshibaTablet",
        r"Android.*(AT100|AT105|AT200|AT205|AT270|AT275|AT300|AT305|AT1S5"
        r"|AT500|AT570|AT700|AT830)|TOSHIBA.*FOLIO",
    ),
    (
        "LGTablet",
        r"\bL-06C|LG-V909|LG-V900|LG-V700|LG-V510|LG-V500|LG-V410|LG-V400"
        r"|LG-VK810\b",
    ),
    ("FujitsuTablet", r"Android.*\b(F-01D|F-02F|F-05E|F-10D|M532|Q572)\b"),
    ("PrestigioTablet", r"\bPMP[0-9]{4}[A-Z]?|\bPMT[0-9]{4}|\bPER[0-9]{4}"),
    (
        "LenovoTablet",
        r"Lenovo TAB|Idea(Tab|Pad)( A1|A10| K1|)|ThinkPad([ ]+)?Tablet"
        r"|YT3?-X[0-9]{2,3}[A-Z]|\bTB[0-9]?-X?[0-9]{3,4}[A-Z]\b|Tab2A7-[12]0F"
        r"|Lenovo.*(S2109|S2110|S5000|S6000|K3011|A3000|A3500|A1000|A2107"
        r"|A2109|A1107|A5500|A7600|B6000|B8000|B8080)",
    ),
    ("DellTablet", r"Venue 11|Venue 8|Venue 7|Dell Streak 10|Dell Streak 7"),
    (
        "YarvikTablet",
        r"Android.*\b(TAB[0-9]{3}|TAB0[789]-[0-9]{3}|TAB1[03]-[0-9]{3}"
        r"|TAB[0-9]{3}EUK)\b",
    ),
    ("MedionTablet", r"Android.*\bOYO\b|LIFE.*(P9212|P9514|P9516|S9512)|LIFETAB"),
    (
        "ArnovaTablet",
        r"97G4|AN10G2|AN7bG3|AN7fG3|AN8G3|AN8cG3|AN7G3|AN9G3|AN7dG3"
        r"|AN7dG3ST|AN7dG3ChildPad|AN10bG3|AN10bG3DT|AN9G2",
    ),
    ("IntensoTablet", r"INM8002KP|INM1010FP|INM805ND|Intenso Tab|TAB1004"),
    ("IRUTablet", r"M702pro"),
    ("MegafonTablet", r"MegaFon V9|\bZTE V9\b|Android.*\bMT7A\b"),
    ("EbodaTablet", r"E-Boda (Supreme|Impresspeed|Izzycomm|Essential)"),
    (
        "AllViewTablet",
        r"Allview.*(Viva|Alldro|City|Speed|All TV|Frenzy|Quasar|Shine|TX1"
        r"|AX1|AX2)",
    ),
    (
        "ArchosTablet",
        r"\b(101G9|80G9|A101IT)\b|Qilive 97R|Archos5|\bARCHOS (70|79|80|90|97"
        r"|101|FAMILYPAD|)(b|c|)(G10| Cobalt| TITANIUM(HD|)| Xenon| Neon|XSK"
        r"| 2| XS 2| PLATINUM| CARBON|GAMEPAD)\b",
    ),
    (
        "AinolTablet",
        r"NOVO7|NOVO8|NOVO10|Novo7Aurora|Novo7Basic|NOVO7PALADIN|novo9-Spark",
    ),
    ("NokiaLumiaTablet", r"Lumia 2520"),
    (
        "SonyTablet",
        r"Sony.*Tablet|Xperia Tablet|Sony Tablet S|SO-03E|SGPT[0-9]{2,3}"
        r"|SGP[0-9]{3}|EBRD1[12]0[12]|SOT31",
    ),
    (
        "PhilipsTablet",
        r"\b(PI2010|PI3000|PI3100|PI3105|PI3110|PI3205|PI3210|PI3900|PI4010"
        r"|PI7000|PI7100)\b",
    ),
    (
        "CubeTablet",
        r"Android.*(K8GT|U9GT|U10GT|U16GT|U17GT|U18GT|U19GT|U20GT|U23GT"
        r"|U30GT)|CUBE U8GT",
    ),
    (
        "CobyTablet",
        r"MID1042|MID1045|MID1125|MID1126|MID7012|MID7014|MID7015|MID7034"
        r"|MID7035|MID7036|MID7042|MID7048|MID7127|MID8042|MID8048|MID8127"
        r"|MID9042|MID9740|MID9742|MID7022|MID7010",
    ),
    ("MIDTablet", r"M9701|M9000|M9100|M806|M1052|T703|\bMID[0-9]{3,4}\b"),
    (
        "MSITablet",
        r"MSI \b(Primo 73K|Primo 73L|Primo 81L|Primo 77|Primo 93|Primo 75"
        r"|Primo 76|Primo 73|Primo 81|Primo 91|Primo 90|Enjoy 71|Enjoy 7"
        r"|Enjoy 10)\b",
    ),
    (
        "SMiTTablet",
        r"Android.*(\bMID\b|MID-560|MTV-T1200|MTV-PND531|MTV-P1101"
        r"|MTV-PND530)",
    ),
    ("RockChipTablet", r"Android.*(RK2818|RK2808A|RK2918|RK3066)|RK2738|RK2808A"),
    ("FlyTablet", r"IQ310|Fly Vision"),
    (
        "bqTablet",
        r"Android.*(bq)?.*\b(Elcano|Curie|Edison|Maxwell|Kepler|Pascal|Tesla"
        r"|Hypatia|Platon|Newton|Livingstone|Cervantes|Avant|Aquaris ([E|M]10"
        r"|M8))\b|Maxwell.*Lite|Maxwell.*Plus",
    ),
    (
        "HuaweiTablet",
        r"MediaPad|MediaPad 7 Youth|IDEOS S7|S7-201c|S7-202u|S7-101|S7-103"
        r"|S7-104|S7-105|S7-106|S7-201|S7-Slim|M2-A01L|BAH-L09|BAH-W09"
        r"|AGS-L09|CMR-AL19",
    ),
    ("NecTablet", r"\bN-06D|\bN-08D"),
    ("PantechTablet", r"Pantech.*P4100"),
    ("BronchoTablet", r"Broncho.*(N701|N708|N802|a710)"),
    ("VersusTablet", r"TOUCHPAD.*[78910]|\bTOUCHTAB\b"),
    ("ZyncTablet", r"z1000|Z99 2G|z930|z990|z909|Z919|z900"),
    ("PositivoTablet", r"TB07STA|TB10STA|TB07FTA|TB10FTA"),
    ("NabiTablet", r"Android.*\bNabi"),
    ("KoboTablet", r"Kobo Touch|\bK080\b|\bVox\b Build|\bArc\b Build"),
    (
        "DanewTablet",
        r"DSlide.*\b(700|701R|702|703R|704|802|970|971|972|973|974|1010"
        r"|1012)\b",
    ),
    ("TexetTablet", r"NaviPad|\bTB-[0-9]{3}(A|HD|SE)\b|\bTM-[0-9]{4}W?\b"),
    ("PlaystationTablet", r"Playstation.*(Portable|Vita)"),
    (
        "TrekstorTablet",
        r"ST10416-1|VT10416-1|ST70408-1|ST702xx-1|ST702xx-2|ST80208|ST97216"
        r"|ST70104-2|VT10416-2|ST10216-2A|SurfTab",
    ),
    (
        "PyleAudioTablet",
        r"\b(PTBL10CEU|PTBL10C|PTBL72BC|PTBL72BCEU|PTBL7CEU|PTBL7C|PTBL92BC"
        r"|PTBL92BCEU|PTBL9CEU|PTBL9CUK|PTBL9C)\b",
    ),
    (
        "AdvanTablet",
        r"Android.* \b(E3A|T3X|T5C|T5B|T3E|T3C|T3B|T1J|T1F|T2A|T1H|T1i|E1C"
        r"|T1-E|T5-A|T4|E1-B|T2Ci|T1-B|T1-D|O1-A|E1-A|T1-A|T3A|T4i)\b ",
    ),
    (
        "DanyTechTablet",
        r"Genius Tab G3|Genius Tab S2|Genius Tab Q3|Genius Tab G4"
        r"|Genius Tab Q4|Genius Tab G-II|Genius TAB GII|Genius TAB GIII"
        r"|Genius Tab S1",
    ),
    ("GalapadTablet", r"Android [0-9.]+; [a-zA-Z-]+; \bG1\b"),
    (
        "MicromaxTablet",
        r"Funbook|Micromax.*\b(P250|P560|P360|P362|P600|P300|P350|P500"
        r"|P275)\b",
    ),
    (
        "KarbonnTablet",
        r"Android.*\b(A39|A37|A34|ST8|ST10|ST7|Smart Tab3|Smart Tab2)\b",
    ),
    (
        "AllFineTablet",
        r"Fine7 Genius|Fine7 Shine|Fine7 Air|Fine8 Style|Fine9 More"
        r"|Fine10 Joy|Fine11 Wide",
    ),
    ("PROSCANTablet", r"\b(PEM63|PLT[0-9]{4}[A-Z]{0,2})\b"),
    (
        "YONESTablet",
        r"BQ1078|BC1003|BC1077|RK9702|BC9730|BC9001|IT9001|BC7008|BC7010"
        r"|BC708|BC728|BC7012|BC7030|BC7027|BC7026",
    ),
    ("ChangJiaTablet", r"\bTPC[0-9]{4,5}\b"),
    ("GUTablet", r"TX-A1301|TX-M9002|Q702|kf026"),
    (
        "PointOfViewTablet",
        r"TAB-P[A-Z]?-?[0-9]{3,4}N?|TAB-navi-7-3G-M|TAB-PROTAB[0-9A-Z-]+",
    ),
    (
        "OvermaxTablet",
        r"OV-(SteelCore|NewBase|Basecore|Baseone|Exellen|Quattor|EduTab"
        r"|Solution|ACTION|BasicTab|TeddyTab|MagicTab|Stream|TB-08|TB-09)"
        r"|Qualcore 1027",
    ),
    (
        "HCLTablet",
        r"HCL.*Tablet|Connect-3G-2.0|Connect-2G-2.0|ME Tablet U1"
        r"|ME Tablet U2|ME Tablet G1|ME Tablet X1|ME Tablet Y2|ME Tablet Sync",
    ),
    ("DPSTablet", r"DPS Dream 9|DPS Dual 7"),
    (
        "VistureTablet",
        r"V97 HD|i75 3G|Visture V4( HD)?|Visture V5( HD)?|Visture V10",
    ),
    ("CrestaTablet", r"CTP(-)?(810|818|828|838|888|978|980|987|988|989)"),
    ("MediatekTablet", r"\bMT8125|MT8389|MT8135|MT8377\b"),
    ("ConcordeTablet", r"Concorde([ ]+)?Tab|ConCorde ReadMan"),
    (
        "GoCleverTablet",
        r"GOCLEVER TAB|A7GOCLEVER|GCTA722|\bTAB [AIMRST][0-9]{2,4}"
        r"(\.[0-9])?[GL]?\b|M1042|M7841|M742|R1042BK|R1041|R105BK|M713G"
        r"|A972BK",
    ),
    ("ModecomTablet", r"FreeTAB [0-9.]{3,4}"),
    (
        "VoninoTablet",
        r"\b(Argus[ _]?S|Diamond[ _]?79HD|Emerald[ _]?78E|Luna[ _]?70C"
        r"|Onyx[ _]?S|Onyx[ _]?Z|Orin[ _]?HD|Orin[ _]?S|Otis[ _]?S"
        r"|SpeedStar[ _]?S|Magnet[ _]?M9|Primus[ _]?94[ _]?3G|Primus[ _]?94HD"
        r"|Primus[ _]?QS|Android.*\bQ8\b|Sirius[ _]?EVO[ _]?QS|Sirius[ _]?QS"
        r"|Spirit[ _]?S)\b",
    ),
    ("ECSTablet", r"V07OT2|TM105A|S10OT1|TR10CS1"),
    ("StorexTablet", r"eZee[_']?(Tab|Go)[0-9]+|TabLC7|Looney Tunes Tab"),
    (
        "VodafoneTablet",
        r"SmartTab([ ]+)?[0-9]+|SmartTabII10|SmartTabII7|VF-1497|VFD 1400",
    ),
    ("EssentielBTablet", r"Smart[ ']?TAB[ ]+?[0-9]+|Family[ ']?TAB2"),
    (
        "RossMoorTablet",
        r"RM-790|RM-997|RMD-878G|RMD-974R|RMT-705A|RMT-701|RME-601|RMT-501"
        r"|RMT-711",
    ),
    ("iMobileTablet", r"i-mobile i-note"),
    ("TolinoTablet", r"tolino tab [0-9.]+|tolino shine"),
    ("AudioSonicTablet", r"\bC-22Q|T7-QC|T-17B|T-17P\b"),
    ("AMPETablet", r"Android.* A78 "),
    ("SkkTablet", r"Android.* (SKYPAD|PHOENIX|CYCLOPS)"),
    ("TecnoTablet", r"TECNO P9|TECNO DP8D"),
    (
        "JXDTablet",
        r"Android.* \b(F3000|A3300|JXD5000|JXD3000|JXD2000|JXD300B|JXD300"
        r"|S5800|S7800|S602b|S5110b|S7300|S5300|S602|S603|S5100|S5110|S601"
        r"|S7100a|P3000F|P3000s|P101|P200s|P1000m|P200m|P9100|P1000s|S6600b"
        r"|S908|P1000|P300|S18|S6600|S9100)\b",
    ),
    (
        "iJoyTablet",
        r"Tablet (Spirit 7|Essentia|Galatea|Fusion|Onix 7|Landa|Titan|Scooby"
        r"|Deox|Stella|Themis|Argon|Unique 7|Sygnus|Hexen|Finity 7|Cream"
        r"|Cream X2|Jade|Neon 7|Neron 7|Kandy|Scape|Saphyr 7|Rebel|Biox"
        r"|Rebel 8GB|Myst|Draco 7|Tab7-004|Tadeo Jones|Tablet Boing|Arrow"
        r"|Draco Dual Cam|Aurix|Mint|Amity|Revolution|Finity 9|Neon 9|T9w"
        r"|Amity 4GB Dual Cam|Stone 4GB|Stone 8GB|Andromeda|Silken|X2"
        r"|Andromeda II|Halley|Flame|Saphyr 9,7|Touch 8|Planet|Triton"
        r"|Unique 10|Hexen 10|Memphis 4GB|Memphis 8GB|Onix 10)",
    ),
    ("FX2Tablet", r"FX2 PAD7|FX2 PAD10"),
    (
        "XoroTablet",
        r"KidsPAD 701|\bPAD[ ]?(7[0-9]{2}|900|97[0-9]{2}[A-Z]{1,2})\b"
        r"|Tele[Pp][Aa][Dd][0-9]{3,4}Q?|MegaPAD [0-9]{4}",
    ),
    (
        "ViewsonicTablet",
        r"ViewPad 10pi|ViewPad 10e|ViewPad 10s|ViewPad E72|ViewPad7"
        r"|ViewPad E100|ViewPad 7e|ViewSonic VB733|VB100a",
    ),
    ("VerizonTablet", r"QTAQZ3|QTAIR7|QTAQTZ3|QTASUN1|QTASUN2|QTAXIA1"),
    (
        "OdysTablet",
        r"LOOX|XENO10|ODYS[ -](Space|EVO|Xpress|NOON)|\bXELIO\b|Xelio10Pro"
        r"|XELIO7PHONETAB|XELIO10EXTREME|XELIOPT2|NEO_QUAD10",
    ),
    ("CaptivaTablet", r"CAPTIVA PAD"),
    ("IconbitTablet", r"NetTAB|\bNT-[0-9]{4}[A-Z]\b"),
    (
        "TeclastTablet",
        r"Teclast|T98 4G|\bP80\b|\bX90HD\b|X98 Air|\bX89\b|P98 Air|\bX89HD\b"
        r"|P98 3G|\bP90HD\b|P89 3G|X98 3G|\bP70h\b|P79HD 3G|G18d 3G"
        r"|\bP79HD\b|\bP89s\b|\bA88\b|\bP10HD\b|\bP19HD\b|G18 3G|\bP78HD\b"
        r"|T720-3GE|T720-WiFi",
    ),
    (
        "OndaTablet",
        r"\b(V975[ims]|Vi[1-6]0|VX5[38]0W?|V70[1-9]s?|V8[0-9]{2}[swi]?"
        r"|V71[0-9]s?|Vx610[wW]|V9[0-9]{2}[ims]?w?|V1[01][0-9]w|VI30W)\b"
        r"[\s]+|V10 \b4G\b",
    ),
    ("JaytechTablet", r"TPC-PA762"),
    ("BlaupunktTablet", r"Endeavour 800NG|Endeavour 1010"),
    (
        "DigmaTablet",
        r"\b(iDx10|iDx9|iDx8|iDx7|iDxD7|iDxD8|iDsQ8|iDsQ7|iDsD10|iDnD7"
        r"|3TS804H|iDsQ11|iDj7|iDs10)\b",
    ),
    (
        "EvolioTablet",
        r"ARIA_Mini_wifi|Aria[ _]Mini|Evolio X10|Evolio X7|Evolio X8"
        r"|\bEvotab\b|\bNeura\b",
    ),
    ("LavaTablet", r"QPAD E704|\bIvoryS\b|E-TAB IVORY|\bE-TAB\b"),
    (
        "AocTablet",
        r"MW0811|MW0812|MW0922|MTK8382|MW1031|MW0831|MW0821|MW0931|MW0712",
    ),
    (
        "MpmanTablet",
        r"MP1[01] OCTA|MPQC[0-9]{3,4}|\bMPG7\b|MPDCG7[15]|MPDC[0-9]{1,4}(HD)?"
        r"|MP101DC|MP709",
    ),
    (
        "CelkonTablet",
        r"CT695|CT888|CT[\s]?910|CT7 Tab|CT9 Tab|CT3 Tab|CT2 Tab|CT1 Tab"
        r"|C820|C720|\bCT-1\b",
    ),
    (
        "WolderTablet",
        r"miTab \b(DIAMOND|SPACE|BROOKLYN|NEO|FLY|MANHATTAN|FUNK|EVOLUTION"
        r"|SKY|GOCAR|IRON|GENIUS|POP|MINT|EPSILON|BROADWAY|JUMP|HOP|LEGEND"
        r"|NEW AGE|LINE|ADVANCE|FEEL|FOLLOW|LIKE|LINK|LIVE|THINK|FREEDOM"
        r"|CHICAGO|CLEVELAND|BALTIMORE-GH|IOWA|BOSTON|SEATTLE|PHOENIX|DALLAS"
        r"|IN 101|MasterChef)\b",
    ),
    (
        "MediacomTablet",
        r"M-MPI10C3G|M-SP10EG|M-SP10EGP|M-SP10HXAH|M-SP7HXAH|M-SP10HXBH"
        r"|M-SP8HXAH|M-SP8MXA",
    ),
    ("MiTablet", r"\bMI PAD\b|\bHM NOTE 1W\b"),
    ("NibiruTablet", r"Nibiru M1|Nibiru Jupiter One"),
    (
        "NexoTablet",
        r"NEXO NOVA|NEXO 10|NEXO AVIO|NEXO FREE|NEXO GO|NEXO EVO|NEXO 3G"
        r"|NEXO SMART|NEXO KIDDO|NEXO MOBI",
    ),
    (
        "LeaderTablet",
        r"TBLT10Q|TBLT10I|TBL-10WDKB|TBL-10WDKBO2013|TBL-W230V2|TBL-W450"
        r"|TBL-W500|SV572|TBLT7I|TBA-AC7-8G|TBLT79|TBL-8W16|TBL-10W32"
        r"|TBL-10WKB|TBL-W100",
    ),
    ("UbislateTablet", r"UbiSlate[\s]?7C"),
    ("PocketBookTablet", r"Pocketbook"),
    ("KocasoTablet", r"\b(TB-1207)\b"),
    ("HisenseTablet", r"\b(F5281|E2371)\b"),
    ("Hudl", r"Hudl HT7S3|Hudl 2"),
    ("TelstraTablet", r"T-Hub2"),
    (
        "GenericTablet",
        r"Android.*\b97D\b|Tablet(?!.*PC)|BNTV250A|MID-WCDMA|LogicPD Zoom2"
        r"|\bA7EB\b|CatNova8|A1_07|CT704|CT1002|\bM721\b|rk30sdk|\bEVOTAB\b"
        r"|M758A|ET904|ALUMIUM10|Smartfren Tab|Endeavour 1010|Tablet-PC-4"
        r"|Tagi Tab|\bM6pro\b|CT1020W|arc 10HD|\bTP750\b|\bQTAQZ3\b|WVT101"
        r"|TM1088|KT107",
    ),
)

OPERATING_SYSTEMS: t.Tuple[t.Tuple[str, str], ...] = (
    ("AndroidOS", r"Android"),
    ("BlackBerryOS", r"BlackBerry|\bBB10\b|RIM Tablet OS"),
    ("PalmOS", r"PalmOS|AvantGo|Blazer|Elaine|Hiptop|Palm|Plucker|Xiino"),
    ("SymbianOS", r"Symbian|SymbOS|Series60|Series40|SYB-[0-9]+|\bS60\b"),
    (
        "WindowsMobileOS",
        r"Windows CE.*(PPC|Smartphone|Mobile|[0-9]{3}x[0-9]{3})"
        r"|Windows Mobile|Windows Phone [0-9.]+|WCE;",
    ),
    (
        "WindowsPhoneOS",
        r"Windows Phone 10\.0|Windows Phone 8\.1|Windows Phone 8\.0"
        r"|Windows Phone OS|XBLWP7|ZuneWP7|Windows NT 6\.[23]; ARM;",
    ),
    ("iOS", r"\biPhone.*Mobile|\biPod|\biPad|AppleCoreMedia"),
    ("iPadOS", r"CPU OS 1[3-9]"),
    ("SailfishOS", r"Sailfish"),
    ("MeeGoOS", r"MeeGo"),
    ("MaemoOS", r"Maemo"),
    ("JavaOS", r"J2ME/|\bMIDP\b|\bCLDC\b"),
    ("webOS", r"webOS|hpwOS"),
    ("badaOS", r"\bBada\b"),
    ("BREWOS", r"BREW"),
)

BROWSERS: t.Tuple[t.Tuple[str, str], ...] = (
    ("Chrome", r"\bCrMo\b|CriOS|Android.*Chrome/[.0-9]* (Mobile)?"),
    ("Dolfin", r"\bDolfin\b"),
    (
        "Opera",
        r"Opera.*Mini|Opera.*Mobi|Android.*Opera|Mobile.*OPR/[0-9.]+$"
        r"|Coast/[0-9.]+",
    ),
    ("Skyfire", r"Skyfire"),
    ("Edge", r"EdgiOS|EdgA/|Mobile Safari/[.0-9]* Edge"),
    ("IE", r"IEMobile|MSIEMobile"),
    (
        "Firefox",
        r"Fennec|fennec|Firefox.*Maemo|(Mobile|Tablet).*Firefox|Firefox.*Mobile"
        r"|FxiOS",
    ),
    ("Bolt", r"\bBolt\b"),
    ("TeaShark", r"TeaShark"),
    ("Blazer", r"Blazer"),
    ("Safari", r"Version((?!\bEdge\b).)*Mobile.*Safari|Safari.*Mobile|MobileSafari"),
    ("WeChat", r"\bMicroMessenger\b"),
    ("UCBrowser", r"UC.*Browser|UCWEB"),
    ("baiduboxapp", r"baiduboxapp"),
    ("baidubrowser", r"baidubrowser"),
    ("DiigoBrowser", r"DiigoBrowser"),
    ("Mercury", r"\bMercury\b"),
    ("ObigoBrowser", r"Obigo"),
    ("NetFront", r"NF-Browser"),
    (
        "GenericBrowser",
        r"NokiaBrowser|OviBrowser|OneBrowser|TwonkyBeamBrowser|SEMC.*Browser"
        r"|FlyFlow|Minimo|NetFront|Novarra-Vision|MQQBrowser|MicroMessenger",
    ),
    ("PaleMoon", r"Android.*PaleMoon|Mobile.*PaleMoon"),
)

#: Utilities are not part of ``is_mobile()`` unless flagged here.
UTILITIES: t.Tuple[t.Tuple[str, str, bool], ...] = (
    ("WebKit", r"(WebKit)[ /]([\w.]+)", False),
    (
        "Console",
        r"\b(Nintendo|Nintendo WiiU|Nintendo 3DS|Nintendo Switch|PLAYSTATION"
        r"|Xbox)\b",
        False,
    ),
    ("Watch", r"SM-V700", True),
)

#: Placeholder for the version number in :data:`PROPERTIES`.
VER = r"([\w._\+]+)"

#: Version extraction patterns.  The first pattern with a non-empty match
#: wins.
PROPERTIES: t.Dict[str, t.Tuple[str, ...]] = {
    # Build
    "Mobile": ("Mobile/[VER]",),
    "Build": ("Build/[VER]",),
    "Version": ("Version/[VER]",),
    "VendorID": ("VendorID/[VER]",),
    # Devices
    "iPad": ("iPad.*CPU[a-z ]+[VER]",),
    "iPhone": ("iPhone.*CPU[a-z ]+[VER]",),
    "iPod": ("iPod.*CPU[a-z ]+[VER]",),
    "Kindle": ("Kindle/[VER]",),
    # Browsers
    "Chrome": ("Chrome/[VER]", "CriOS/[VER]", "CrMo/[VER]"),
    "Coast": ("Coast/[VER]",),
    "Dolfin": ("Dolfin/[VER]",),
    "Firefox": ("Firefox/[VER]", "FxiOS/[VER]"),
    "Fennec": ("Fennec/[VER]",),
    "Edge": ("Edge/[VER]", "EdgiOS/[VER]", "EdgA/[VER]"),
    "IE": (
        "IEMobile/[VER];",
        "IEMobile [VER]",
        "MSIE [VER];",
        r"Trident/[0-9.]+;.*rv:[VER]",
    ),
    "NetFront": ("NetFront/[VER]",),
    "NokiaBrowser": ("NokiaBrowser/[VER]",),
    "Opera": (" OPR/[VER]", "Opera Mini/[VER]", "Version/[VER]"),
    "Opera Mini": ("Opera Mini/[VER]",),
    "Opera Mobi": ("Version/[VER]",),
    "UCBrowser": ("UCWEB[VER]", "UC.*Browser/[VER]"),
    "MQQBrowser": ("MQQBrowser/[VER]",),
    "MicroMessenger": ("MicroMessenger/[VER]",),
    "baiduboxapp": ("baiduboxapp/[VER]",),
    "baidubrowser": ("baidubrowser/[VER]",),
    "SamsungBrowser": ("SamsungBrowser/[VER]",),
    "Iron": ("Iron/[VER]",),
    "Safari": ("Version/[VER]", "Safari/[VER]"),
    "Skyfire": ("Skyfire/[VER]",),
    "Tizen": ("Tizen/[VER]",),
    "Webkit": ("webkit[ /][VER]",),
    "PaleMoon": ("PaleMoon/[VER]",),
    "SailfishBrowser": ("SailfishBrowser/[VER]",),
    # Engines
    "Gecko": ("Gecko/[VER]",),
    "Trident": ("Trident/[VER]",),
    "Presto": ("Presto/[VER]",),
    "Goanna": ("Goanna/[VER]",),
    # Operating systems
    "iOS": (r" \bi?OS\b [VER][ ;]{1}",),
    "Android": ("Android [VER]",),
    "Sailfish": ("Sailfish [VER]",),
    "BlackBerry": (
        r"BlackBerry[\w]+/[VER]",
        "BlackBerry.*Version/[VER]",
        "Version/[VER]",
    ),
    "BREW": ("BREW [VER]",),
    "Java": ("Java/[VER]",),
    "Windows Phone OS": ("Windows Phone OS [VER]", "Windows Phone [VER]"),
    "Windows Phone": ("Windows Phone [VER]",),
    "Windows CE": ("Windows CE/[VER]",),
    "Windows NT": ("Windows NT [VER]",),
    "Symbian": ("SymbianOS/[VER]", "Symbian/[VER]"),
    "webOS": ("webOS/[VER]", "hpwOS/[VER];"),
}


class Rule(t.NamedTuple):
    """A named detection pattern."""

    name: str
    pattern: str
    category: Category
    #: whether a match makes ``is_mobile()`` true
    mobile: bool = True


class RuleTable:
    """An ordered, read only collection of :class:`Rule` objects with
    case insensitive lookup by name, and the version patterns that go
    with them.  Patterns are compiled once, on construction.

    :param rules: the rules in matching order.
    :param properties: mapping of property names to one or more version
                       patterns containing the ``[VER]`` placeholder.
    """

    def __init__(
        self,
        rules: t.Iterable[Rule],
        properties: t.Mapping[str, t.Iterable[str]] | None = None,
    ) -> None:
        self._rules = tuple(rules)
        self._by_name: dict[str, Rule] = {}
        self._compiled: dict[str, t.Pattern[str]] = {}

        for rule in self._rules:
            key = rule.name.lower()
            if key in self._by_name:
                raise ValueError(f"Duplicate rule name {rule.name!r}.")
            self._by_name[key] = rule
            self._compiled[rule.name] = re.compile(rule.pattern)

        devices = tuple(
            rule
            for rule in self._rules
            if rule.category in (Category.PHONE, Category.TABLET)
        )
        self._mobile_rules = devices + tuple(
            rule
            for rule in self._rules
            if rule.mobile and rule.category not in (Category.PHONE, Category.TABLET)
        )
        self._tablet_rules = tuple(
            rule for rule in self._rules if rule.category is Category.TABLET
        )

        #: digest of every rule, identifies the table in cache keys
        self.fingerprint = hashlib.sha1(
            "\n".join(
                f"{r.name}\t{r.pattern}\t{r.category.value}\t{r.mobile:d}"
                for r in self._rules
            ).encode("utf-8")
        ).hexdigest()

        self._properties: dict[str, tuple[str, tuple[t.Pattern[str], ...]]] = {}

        for name, patterns in (properties or {}).items():
            if isinstance(patterns, str):
                patterns = (patterns,)
            self._properties[name.lower()] = (
                name,
                tuple(
                    re.compile(p.replace("[VER]", VER), re.IGNORECASE | re.DOTALL)
                    for p in patterns
                ),
            )

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> t.Iterator[Rule]:
        return iter(self._rules)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._by_name

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {len(self._rules)} rules>"

    def lookup(self, name: str) -> Rule:
        """Return the rule called `name`, ignoring case.

        :raises UnknownRuleError: if there is no such rule.
        """
        try:
            return self._by_name[name.lower()]
        except (KeyError, AttributeError):
            raise UnknownRuleError(name) from None

    def compiled(self, rule: Rule) -> t.Pattern[str]:
        return self._compiled[rule.name]

    def all_rules(self) -> tuple[Rule, ...]:
        return self._rules

    def rules_in(self, *categories: Category) -> tuple[Rule, ...]:
        return tuple(rule for rule in self._rules if rule.category in categories)

    def mobile_rules(self) -> tuple[Rule, ...]:
        """The rules checked by ``is_mobile()``: every phone and tablet,
        followed by the other rules flagged as mobile.
        """
        return self._mobile_rules

    def tablet_rules(self) -> tuple[Rule, ...]:
        return self._tablet_rules

    def lookup_property(self, name: str) -> tuple[t.Pattern[str], ...]:
        """Return the compiled version patterns for the property `name`,
        ignoring case.

        :raises UnknownPropertyError: if there is no such property.
        """
        try:
            return self._properties[name.lower()][1]
        except (KeyError, AttributeError):
            raise UnknownPropertyError(name) from None

    def property_names(self) -> list[str]:
        return [name for name, _ in self._properties.values()]

    def as_dict(self) -> dict[str, str]:
        """Map every rule name to its pattern, in table order."""
        return {rule.name: rule.pattern for rule in self._rules}


def build_rule_table() -> RuleTable:
    """Build a :class:`RuleTable` from the rules in this module."""
    rules: list[Rule] = []
    rules.extend(Rule(n, p, Category.PHONE) for n, p in PHONE_DEVICES)
    rules.extend(Rule(n, p, Category.TABLET) for n, p in TABLET_DEVICES)
    rules.extend(Rule(n, p, Category.OPERATING_SYSTEM) for n, p in OPERATING_SYSTEMS)
    rules.extend(Rule(n, p, Category.BROWSER) for n, p in BROWSERS)
    rules.extend(Rule(n, p, Category.UTILITY, m) for n, p, m in UTILITIES)
    return RuleTable(rules, PROPERTIES)


DEFAULT_RULE_TABLE = build_rule_table()
