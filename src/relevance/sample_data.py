"""Curated sample catalog shipped with CuraLink."""

from __future__ import annotations

SAMPLE_EXPERTS: list[dict] = [
    {
        "id": "1",
        "name": "Dr. Sarah Chen",
        "specialization": "Oncology & Immunotherapy",
        "institution": "Memorial Sloan Kettering Cancer Center",
        "country": "United States",
        "tags": ["Cancer Research", "Immunotherapy", "Clinical Trials"],
    },
    {
        "id": "2",
        "name": "Prof. Michael Anderson",
        "specialization": "Cardiovascular Disease",
        "institution": "Mayo Clinic",
        "country": "United States",
        "tags": ["Cardiology", "Heart Disease", "Prevention"],
    },
    {
        "id": "3",
        "name": "Dr. Yuki Tanaka",
        "specialization": "Neurodegenerative Diseases",
        "institution": "University of Tokyo",
        "country": "Japan",
        "tags": ["Alzheimer's", "Parkinson's", "Neurology"],
    },
    {
        "id": "4",
        "name": "Dr. Maria Rodriguez",
        "specialization": "Rare Genetic Disorders",
        "institution": "Hospital Universitario La Paz",
        "country": "Spain",
        "tags": ["Genetics", "Rare Diseases", "Pediatrics"],
    },
    {
        "id": "5",
        "name": "Prof. David Kim",
        "specialization": "Diabetes & Metabolic Disorders",
        "institution": "Seoul National University Hospital",
        "country": "South Korea",
        "tags": ["Diabetes", "Metabolism", "Endocrinology"],
    },
    {
        "id": "6",
        "name": "Dr. Emma Williams",
        "specialization": "Infectious Diseases",
        "institution": "London School of Hygiene",
        "country": "United Kingdom",
        "tags": ["Virology", "Epidemiology", "Public Health"],
    },
    {
        "id": "7",
        "name": "Prof. Ahmed Hassan",
        "specialization": "Cancer Genomics",
        "institution": "King Faisal Specialist Hospital",
        "country": "Saudi Arabia",
        "tags": ["Genomics", "Precision Medicine", "Cancer"],
    },
    {
        "id": "8",
        "name": "Dr. Lisa Müller",
        "specialization": "Autoimmune Diseases",
        "institution": "Charité University Hospital",
        "country": "Germany",
        "tags": ["Rheumatology", "Autoimmune", "Immunology"],
    },
    {
        "id": "9",
        "name": "Dr. Raj Patel",
        "specialization": "Stem Cell Therapy",
        "institution": "All India Institute of Medical Sciences",
        "country": "India",
        "tags": ["Stem Cells", "Regenerative Medicine", "Research"],
    },
    {
        "id": "10",
        "name": "Prof. Sophie Dubois",
        "specialization": "Pediatric Oncology",
        "institution": "Institut Curie",
        "country": "France",
        "tags": ["Pediatrics", "Cancer", "Clinical Research"],
    },
]

SAMPLE_TRIALS: list[dict] = [
    {
        "id": "trial-1",
        "title": "Phase III Study of Novel Immunotherapy for Advanced Melanoma",
        "phase": "Phase III",
        "status": "Recruiting",
        "description": (
            "A randomized, double-blind, placebo-controlled trial evaluating the "
            "efficacy and safety of a novel checkpoint inhibitor combination in "
            "patients with advanced melanoma who have progressed on standard therapy."
        ),
        "location": "Multiple sites across US, EU, and Asia",
        "summary": (
            "This trial tests a new combination of drugs that help the immune "
            "system fight melanoma cancer cells."
        ),
        "tags": ["Melanoma", "Immunotherapy", "Oncology"],
    },
    {
        "id": "trial-2",
        "title": "Gene Therapy for Sickle Cell Disease - Long-term Follow-up",
        "phase": "Phase II",
        "status": "Active",
        "description": (
            "A long-term follow-up study of patients who received CRISPR-based gene "
            "therapy for sickle cell disease, monitoring safety, efficacy, and "
            "quality of life outcomes."
        ),
        "location": "Boston, San Francisco, London",
        "summary": (
            "Following patients who received gene editing treatment to see if it "
            "continues to help with sickle cell disease."
        ),
        "tags": ["Gene Therapy", "CRISPR", "Sickle Cell"],
    },
    {
        "id": "trial-3",
        "title": "Alzheimer's Disease Prevention Trial in High-Risk Individuals",
        "phase": "Phase II",
        "status": "Recruiting",
        "description": (
            "A prevention trial testing whether an investigational drug can delay "
            "the onset of Alzheimer's disease in cognitively normal individuals "
            "with genetic risk factors."
        ),
        "location": "Academic medical centers worldwide",
        "summary": (
            "Testing if a new drug can prevent or delay Alzheimer's in people at "
            "high risk."
        ),
        "tags": ["Alzheimer's", "Prevention", "Neurology"],
    },
    {
        "id": "trial-4",
        "title": "CAR-T Cell Therapy for Refractory Multiple Myeloma",
        "phase": "Phase I/II",
        "status": "Recruiting",
        "description": (
            "Evaluating the safety and preliminary efficacy of BCMA-targeted CAR-T "
            "cell therapy in patients with relapsed/refractory multiple myeloma."
        ),
        "location": "Major cancer centers in North America",
        "summary": (
            "Using modified immune cells to attack multiple myeloma cancer that "
            "hasn't responded to other treatments."
        ),
        "tags": ["CAR-T", "Multiple Myeloma", "Cell Therapy"],
    },
    {
        "id": "trial-5",
        "title": "Digital Therapeutics for Type 2 Diabetes Management",
        "phase": "Phase III",
        "status": "Active",
        "description": (
            "A pragmatic trial testing an AI-powered digital therapeutic platform "
            "for improving glycemic control and medication adherence in type 2 "
            "diabetes patients."
        ),
        "location": "Conducted remotely - International",
        "summary": (
            "Testing if an app with AI coaching can help people manage their "
            "diabetes better."
        ),
        "tags": ["Diabetes", "Digital Health", "AI"],
    },
]

SAMPLE_PUBLICATIONS: list[dict] = [
    {
        "id": "pub-1",
        "title": (
            "CRISPR-Cas9 Gene Editing: Mechanisms, Applications, and Clinical "
            "Prospects"
        ),
        "authors": ["Zhang, F.", "Doudna, J.A.", "Charpentier, E."],
        "abstract": (
            "CRISPR-Cas9 has revolutionized genome editing with its precision and "
            "versatility. This review examines the molecular mechanisms underlying "
            "CRISPR-Cas9 function, discusses current applications in basic research "
            "and therapeutic development, and explores the prospects and challenges "
            "for clinical translation."
        ),
        "summary": (
            "A comprehensive review of how CRISPR gene editing works and its "
            "potential medical uses."
        ),
        "tags": ["CRISPR", "Gene Editing", "Molecular Biology"],
        "year": 2024,
    },
    {
        "id": "pub-2",
        "title": (
            "Immunotherapy Combinations in Advanced Cancer: Synergy and Resistance "
            "Mechanisms"
        ),
        "authors": ["Chen, D.S.", "Mellman, I.", "Wolchok, J.D."],
        "abstract": (
            "Combination immunotherapy strategies have shown remarkable efficacy in "
            "various cancers. This article explores the biological rationale for "
            "different combination approaches, mechanisms of synergy, patterns of "
            "resistance, and biomarkers for patient selection."
        ),
        "summary": (
            "Explains how combining different immunotherapy drugs can work better "
            "against cancer."
        ),
        "tags": ["Immunotherapy", "Cancer", "Oncology"],
        "year": 2024,
    },
    {
        "id": "pub-3",
        "title": (
            "Artificial Intelligence in Medical Diagnosis: Current Capabilities and "
            "Future Directions"
        ),
        "authors": ["Topol, E.J.", "Rajpurkar, P.", "Lungren, M.P."],
        "abstract": (
            "AI and deep learning have achieved human-level performance in various "
            "diagnostic tasks. This review assesses current AI applications in "
            "radiology, pathology, and clinical decision support, discusses "
            "limitations and bias concerns, and projects future developments."
        ),
        "summary": (
            "Reviews how AI is being used to help doctors diagnose diseases and "
            "what's coming next."
        ),
        "tags": ["AI", "Diagnostics", "Machine Learning"],
        "year": 2024,
    },
    {
        "id": "pub-4",
        "title": "The Microbiome-Gut-Brain Axis in Neurological Disorders",
        "authors": ["Cryan, J.F.", "Dinan, T.G.", "Mayer, E.A."],
        "abstract": (
            "Emerging evidence suggests bidirectional communication between gut "
            "microbiota and the central nervous system. This article reviews the "
            "role of the microbiome in neurodevelopmental and neurodegenerative "
            "disorders and discusses therapeutic implications."
        ),
        "summary": (
            "How bacteria in your gut might affect brain health and diseases like "
            "Parkinson's and Alzheimer's."
        ),
        "tags": ["Microbiome", "Neuroscience", "Gut-Brain Axis"],
        "year": 2023,
    },
    {
        "id": "pub-5",
        "title": (
            "Precision Medicine in Cardiovascular Disease: Genomics, Biomarkers, "
            "and Personalized Treatment"
        ),
        "authors": ["Anderson, K.M.", "Mehta, L.S.", "Shah, R.V."],
        "abstract": (
            "Cardiovascular disease remains the leading cause of mortality "
            "worldwide. This review examines how genomic profiling, novel "
            "biomarkers, and advanced imaging are enabling personalized risk "
            "stratification and targeted therapies in cardiovascular medicine."
        ),
        "summary": (
            "How genetic testing and biomarkers can help tailor heart disease "
            "treatment to each patient."
        ),
        "tags": ["Precision Medicine", "Cardiology", "Genomics"],
        "year": 2023,
    },
]
