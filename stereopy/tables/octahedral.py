"""
Octahedral permutation tables.

Literal data for the 30 octahedral configuration classes (``@OH1`` ..
``@OH30``). Each class is listed as its full orbit of 24 carrier orderings,
written as 1-based slot numbers. The first ordering of every orbit is the
one used in the OpenSMILES table.

``OH_SUPERPERM`` is a minimal superpermutation over ``1..6`` (OEIS A180632)
and ``OH_CLASS_LABELS`` marks, for each window start in it, which class the
six digits at that position belong to. The label string is produced by
:mod:`stereopy.tables.builder`; regenerate it with
``python -m stereopy.tables.builder`` whenever the orbits or the
superpermutation change.
"""

from __future__ import annotations

from typing import Final


# OH1 = '1', ..., OH9 = '9', OH10 = 'a', ..., OH30 = 'u'
OH_CLASS_IDS: Final[str] = "123456789abcdefghijklmnopqrstu"

# Marker for windows that are not labelled with any class
UNASSIGNED: Final[str] = " "

OH_ORBITS: Final[tuple[tuple[str, ...], ...]] = (
    # @OH1
    (
        "123456", "134526", "145236", "152346", "215634", "231564",
        "256314", "263154", "312645", "326415", "341265", "364125",
        "413652", "436512", "451362", "465132", "514623", "521463",
        "546213", "562143", "625431", "632541", "643251", "654321",
    ),
    # @OH2
    (
        "125436", "132546", "143256", "154326", "213654", "236514",
        "251364", "265134", "314625", "321465", "346215", "362145",
        "415632", "431562", "456312", "463152", "512643", "526413",
        "541263", "564123", "623451", "634521", "645231", "652341",
    ),
    # @OH3
    (
        "123465", "134625", "146235", "162345", "216534", "231654",
        "253164", "265314", "312546", "325416", "341256", "354126",
        "413562", "435612", "456132", "461352", "526431", "532641",
        "543261", "564321", "614523", "621453", "645213", "652143",
    ),
    # @OH4
    (
        "123546", "135426", "142356", "154236", "214635", "231465",
        "246315", "263145", "312654", "326514", "351264", "365124",
        "415623", "421563", "456213", "462153", "513642", "536412",
        "541362", "564132", "624531", "632451", "645321", "653241",
    ),
    # @OH5
    (
        "123645", "136425", "142365", "164235", "214536", "231456",
        "245316", "253146", "312564", "325614", "356124", "361254",
        "416523", "421653", "452163", "465213", "524631", "532461",
        "546321", "563241", "613542", "635412", "641352", "654132",
    ),
    # @OH6
    (
        "123564", "135624", "156234", "162354", "216435", "231645",
        "243165", "264315", "312456", "324516", "345126", "351246",
        "426531", "432651", "453261", "465321", "513462", "534612",
        "546132", "561342", "615423", "621543", "642153", "654213",
    ),
    # @OH7
    (
        "123654", "136524", "152364", "165234", "215436", "231546",
        "243156", "254316", "312465", "324615", "346125", "361245",
        "425631", "432561", "456321", "463251", "516423", "521643",
        "542163", "564213", "613452", "634512", "645132", "651342",
    ),
    # @OH8
    (
        "124356", "135246", "143526", "152436", "215643", "241563",
        "256413", "264153", "314652", "346512", "351462", "365142",
        "412635", "426315", "431265", "463125", "513624", "521364",
        "536214", "562134", "625341", "634251", "642531", "653421",
    ),
    # @OH9
    (
        "124365", "136245", "143625", "162435", "216543", "241653",
        "254163", "265413", "314562", "345612", "356142", "361452",
        "412536", "425316", "431256", "453126", "526341", "534261",
        "542631", "563421", "613524", "621354", "635214", "652134",
    ),
    # @OH10
    (
        "125346", "134256", "142536", "153426", "214653", "246513",
        "251463", "265143", "315642", "341562", "356412", "364152",
        "413625", "421365", "436215", "462135", "512634", "526314",
        "531264", "563124", "624351", "635241", "643521", "652431",
    ),
    # @OH11
    (
        "126345", "134265", "142635", "163425", "214563", "245613",
        "256143", "261453", "316542", "341652", "354162", "365412",
        "413526", "421356", "435216", "452136", "524361", "536241",
        "543621", "562431", "612534", "625314", "631254", "653124",
    ),
    # @OH12
    (
        "125364", "136254", "153624", "162534", "216453", "245163",
        "251643", "264513", "315462", "346152", "354612", "361542",
        "426351", "435261", "452631", "463521", "512436", "524316",
        "531246", "543126", "613425", "621345", "634215", "642135",
    ),
    # @OH13
    (
        "126354", "135264", "152634", "163524", "215463", "246153",
        "254613", "261543", "316452", "345162", "351642", "364512",
        "425361", "436251", "453621", "462531", "513426", "521346",
        "534216", "542136", "612435", "624315", "631245", "643125",
    ),
    # @OH14
    (
        "124536", "132456", "145326", "153246", "213645", "236415",
        "241365", "264135", "315624", "321564", "356214", "362154",
        "412653", "426513", "451263", "465123", "514632", "531462",
        "546312", "563142", "623541", "635421", "642351", "654231",
    ),
    # @OH15
    (
        "124635", "132465", "146325", "163245", "213546", "235416",
        "241356", "254136", "316524", "321654", "352164", "365214",
        "412563", "425613", "456123", "461253", "523641", "536421",
        "542361", "564231", "614532", "631452", "645312", "653142",
    ),
    # @OH16
    (
        "126435", "132645", "143265", "164325", "213564", "235614",
        "256134", "261354", "314526", "321456", "345216", "352146",
        "416532", "431652", "453162", "465312", "523461", "534621",
        "546231", "562341", "612543", "625413", "641253", "654123",
    ),
    # @OH17
    (
        "125634", "132564", "156324", "163254", "213456", "234516",
        "245136", "251346", "316425", "321645", "342165", "364215",
        "423651", "436521", "452361", "465231", "512463", "524613",
        "546123", "561243", "615432", "631542", "643152", "654312",
    ),
    # @OH18
    (
        "126534", "132654", "153264", "165324", "213465", "234615",
        "246135", "261345", "315426", "321546", "342156", "354216",
        "423561", "435621", "456231", "462351", "516432", "531642",
        "543162", "564312", "612453", "624513", "645123", "651243",
    ),
    # @OH19
    (
        "124563", "145623", "156243", "162453", "216345", "234165",
        "241635", "263415", "326541", "342651", "354261", "365421",
        "412356", "423516", "435126", "451236", "514362", "536142",
        "543612", "561432", "615324", "621534", "632154", "653214",
    ),
    # @OH20
    (
        "124653", "146523", "152463", "165243", "215346", "234156",
        "241536", "253416", "325641", "342561", "356421", "364251",
        "412365", "423615", "436125", "461235", "516324", "521634",
        "532164", "563214", "614352", "635142", "643512", "651432",
    ),
    # @OH21
    (
        "125463", "146253", "154623", "162543", "216354", "235164",
        "251634", "263514", "326451", "345261", "352641", "364521",
        "415362", "436152", "453612", "461532", "512346", "523416",
        "534126", "541236", "614325", "621435", "632145", "643215",
    ),
    # @OH22
    (
        "126453", "145263", "152643", "164523", "215364", "236154",
        "253614", "261534", "325461", "346251", "354621", "362541",
        "416352", "435162", "451632", "463512", "514326", "521436",
        "532146", "543216", "612345", "623415", "634125", "641235",
    ),
    # @OH23
    (
        "125643", "142563", "156423", "164253", "214356", "235146",
        "243516", "251436", "324651", "346521", "352461", "365241",
        "416325", "421635", "432165", "463215", "512364", "523614",
        "536124", "561234", "615342", "634152", "641532", "653412",
    ),
    # @OH24
    (
        "126543", "142653", "154263", "165423", "214365", "236145",
        "243615", "261435", "324561", "345621", "356241", "362451",
        "415326", "421536", "432156", "453216", "516342", "534162",
        "541632", "563412", "612354", "623514", "635124", "651234",
    ),
    # @OH25
    (
        "134562", "145632", "156342", "163452", "236541", "243651",
        "254361", "265431", "316245", "324165", "341625", "362415",
        "413256", "425136", "432516", "451326", "514263", "526143",
        "542613", "561423", "615234", "623154", "631524", "652314",
    ),
    # @OH26
    (
        "134652", "146532", "153462", "165342", "235641", "243561",
        "256431", "264351", "315246", "324156", "341526", "352416",
        "413265", "426135", "432615", "461325", "516234", "523164",
        "531624", "562314", "614253", "625143", "642513", "651423",
    ),
    # @OH27
    (
        "135462", "146352", "154632", "163542", "236451", "245361",
        "253641", "264531", "316254", "325164", "351624", "362514",
        "415263", "426153", "452613", "461523", "513246", "524136",
        "532416", "541326", "614235", "623145", "631425", "642315",
    ),
    # @OH28
    (
        "136452", "145362", "153642", "164532", "235461", "246351",
        "254631", "263541", "315264", "326154", "352614", "361524",
        "416253", "425163", "451623", "462513", "514236", "523146",
        "531426", "542316", "613245", "624135", "632415", "641325",
    ),
    # @OH29
    (
        "135642", "143562", "156432", "164352", "234651", "246531",
        "253461", "265341", "314256", "325146", "342516", "351426",
        "416235", "423165", "431625", "462315", "513264", "526134",
        "532614", "561324", "615243", "624153", "641523", "652413",
    ),
    # @OH30
    (
        "136542", "143652", "154362", "165432", "234561", "245631",
        "256341", "263451", "314265", "326145", "342615", "361425",
        "415236", "423156", "431526", "452316", "516243", "524163",
        "541623", "562413", "613254", "625134", "632514", "651324",
    ),
)

# https://oeis.org/A180632
OH_SUPERPERM: Final[str] = (
    "123456123451623451263451236451326451362451364251364521364512"
    "346512341562341526341523641523461523416523412563412536412534"
    "612534162534126534123564123546123541623541263541236541326543"
    "126453162435162431562431652431625431624531642531462531426531"
    "425631425361425316452314652314562314526314523614523164532164"
    "531264351264315264312564321564231546231542631542361542316542"
    "315642135642153624153621453621543621534621354621345621346521"
    "346251346215364215634216534216354216345216342516342156432516"
    "432561432564132564312654321654326153426135426134526134256134"
    "265134261532465132465312463512463152463125463215463251463254"
    "163254613254631245632145632415632451632456132456312465321465"
    "324165324615326415326145326154326514362514365214356214352614"
    "352164352146352143651243615243612543612453612435612436514235"
    "614235164235146235142635142365143265413625413652413562413526"
    "41352461352416352413654213654123"
)

OH_CLASS_LABELS: Final[str] = (
    "1u9fnm hdsq32 6eabu7 jn5r 7ptglc 189oih 45kqp2 sl3b8e di l3t"
    "8eo  ka46gm qrd9jn u7feat 1gicrp ljb572  3fhuom 9cr41g at67f"
    "b kopsc8 l1eitn  j6qa2m 4schko fbut6e 328ds5 lk7p 5rqi phc 1"
    "mr gq 9anmru d72ejb 6gfkac trl17i pj45 ihn8 5e2ldb suo63f tn"
    "71er admjuq 93 dm2 s48khp 59jiqr gmca4f 1hno93 uq6 s4okhc f9"
    "a gqkj42 6husm3 d95n 3loe nfr 7clgtp io981h 4fkmc6 st3boe u1"
    "a 7cbgtk 6o cbptkl 8235sd e67uba jkqg a9frm1 chpo48 iqn59d 3"
    "msuh6 24 msfh 41p9 h53q8d nlrei7 jp2g5k b8tslo ci 8t 1prcig "
    "75bjl2 k84sph qi 84o 1mnf9u 3q mna9 qg54jp i71lrt cakfg6 bje"
    "27d ur je na1urf tgbc fsmo6h 42pqk5 8b3l 5njidr 7utaef 139on"
    "h md6qu2 se d6j 7klgbp 5sq82h 46cmkf ob3tse u2a 7k 6jm2aq 4r"
    "p9gi 57dl i318no tubfe6 sdh2 64a j9drqn uhf3 ntie1l 8cspok b"
    "f76ta g14rc9 mo 14ic olst8b k5g2pj 7ierln d8q35h 9p 8q 4ig9p"
    "r jld75e n813io tpbclk s5h2 kmg j9 4acmgf 17nt f36ous bdl2e5"
    " 8nhi39 qujmda re uj6da2 bg"
)
