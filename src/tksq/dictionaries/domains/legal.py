"""Legal overlay: contracts and statutes."""

LEGAL_ABBREVIATIONS = (
    ("agreement", "agmt"),
    ("amendment", "amdt"),
    ("article", "art"),
    ("certificate", "cert"),
    ("clause", "cl"),
    ("contract", "ctr"),
    ("corporation", "corp"),
    ("defendant", "def"),
    ("department", "dept"),
    ("document", "doc"),
    ("documents", "docs"),
    ("execution", "exec"),
    ("government", "govt"),
    ("incorporation", "inc"),
    ("jurisdiction", "jur"),
    ("legislation", "legis"),
    ("paragraph", "para"),
    ("plaintiff", "pl"),
    ("provision", "prov"),
    ("regulation", "reg"),
    ("regulations", "regs"),
    ("representative", "rep"),
    ("section", "sec"),
    ("statute", "stat"),
    ("subdivision", "subdiv"),
    ("supplement", "supp"),
    ("transaction", "txn"),
)

LEGAL_SUBSTITUTIONS = (
    ("in accordance with", "per"),
    ("pursuant to", "per"),
    ("in compliance with", "per"),
    ("with respect to", "regarding"),
    ("in connection with", "regarding"),
    ("with regard to", "regarding"),
    ("in the event that", "if"),
    ("in the event of", "if"),
    ("on the condition that", "if"),
    ("for the purpose of", "to"),
    ("on the grounds that", "because"),
    ("due to the fact that", "because"),
    ("for the reason that", "because"),
    ("by virtue of", "under"),
    ("subject to the provisions of", "under"),
    ("to the extent that", "insofar as"),
    ("at the present time", "currently"),
    ("at this point in time", "now"),
    ("prior to the commencement of", "before"),
    ("subsequent to", "after"),
    ("it is hereby agreed that", "agreed:"),
    ("the parties hereby agree that", "agreed:"),
    ("notwithstanding the foregoing", "despite above"),
    ("in lieu of", "instead of"),
    ("provided however that", "but"),
    ("shall be entitled to", "may"),
    ("shall have the right to", "may"),
    ("shall be deemed to", "is considered"),
    ("in the absence of", "without"),
    ("in the amount of", "of"),
    ("for a period of", "for"),
    ("within the meaning of", "as defined in"),
    ("the undersigned hereby", "I/we"),
    ("hereinafter referred to as", "called"),
)
