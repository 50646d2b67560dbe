"""
Gap Diagnostic — Banco de perguntas padrão

8 perguntas sobre maturidade do funil de vendas. Cada pergunta tem três
alternativas com pesos 1 / 0.6 / 0.2; quanto pior a alternativa, mais
tags de GAP ela implica.
"""

DEFAULT_QUESTIONS = [
    {
        "id": "q1",
        "text": "Como você avalia a maturidade do seu processo de vendas?",
        "options": [
            {"id": "q1_1", "weight": 1, "gap_types": ["processo"],
             "text": "Processo bem definido, documentado e constantemente otimizado"},
            {"id": "q1_2", "weight": 0.6, "gap_types": ["processo", "documentação"],
             "text": "Processo existe mas não está totalmente documentado"},
            {"id": "q1_3", "weight": 0.2, "gap_types": ["processo", "documentação", "estratégia"],
             "text": "Processo informal ou inexistente"},
        ],
    },
    {
        "id": "q2",
        "text": "Como você monitora e analisa as métricas do seu funil?",
        "options": [
            {"id": "q2_1", "weight": 1, "gap_types": ["monitoramento"],
             "text": "Dashboard em tempo real com KPIs e metas definidas"},
            {"id": "q2_2", "weight": 0.6, "gap_types": ["monitoramento", "metas"],
             "text": "Análise periódica sem metas claras"},
            {"id": "q2_3", "weight": 0.2, "gap_types": ["monitoramento", "metas", "processo"],
             "text": "Não monitoro ou monitoro raramente"},
        ],
    },
    {
        "id": "q3",
        "text": "Qual é o nível de qualificação dos seus leads?",
        "options": [
            {"id": "q3_1", "weight": 1, "gap_types": ["qualificação"],
             "text": "Sistema de lead scoring implementado e validado"},
            {"id": "q3_2", "weight": 0.6, "gap_types": ["qualificação", "processo"],
             "text": "Critérios básicos de qualificação"},
            {"id": "q3_3", "weight": 0.2, "gap_types": ["qualificação", "processo", "eficiência"],
             "text": "Sem critérios definidos"},
        ],
    },
    {
        "id": "q4",
        "text": "Como você gerencia o relacionamento com leads em diferentes estágios?",
        "options": [
            {"id": "q4_1", "weight": 1, "gap_types": ["nutrição"],
             "text": "Jornada personalizada por perfil e estágio"},
            {"id": "q4_2", "weight": 0.6, "gap_types": ["nutrição", "personalização"],
             "text": "Comunicação padronizada para todos"},
            {"id": "q4_3", "weight": 0.2, "gap_types": ["nutrição", "personalização", "estratégia"],
             "text": "Sem estratégia de relacionamento"},
        ],
    },
    {
        "id": "q5",
        "text": "Qual é sua taxa média de conversão entre etapas do funil?",
        "options": [
            {"id": "q5_1", "weight": 1, "gap_types": ["conversão"],
             "text": "Acima de 30% em todas as etapas"},
            {"id": "q5_2", "weight": 0.6, "gap_types": ["conversão", "eficiência"],
             "text": "Entre 10% e 30%"},
            {"id": "q5_3", "weight": 0.2, "gap_types": ["conversão", "eficiência", "monitoramento"],
             "text": "Menos de 10% ou não sei"},
        ],
    },
    {
        "id": "q6",
        "text": "Como você identifica e resolve gargalos no funil?",
        "options": [
            {"id": "q6_1", "weight": 1, "gap_types": ["otimização"],
             "text": "Análise contínua com ações corretivas imediatas"},
            {"id": "q6_2", "weight": 0.6, "gap_types": ["otimização", "processo"],
             "text": "Análise ocasional quando há problemas"},
            {"id": "q6_3", "weight": 0.2, "gap_types": ["otimização", "processo", "monitoramento"],
             "text": "Não há processo formal de identificação"},
        ],
    },
    {
        "id": "q7",
        "text": "Qual o nível de automação do seu funil de vendas?",
        "options": [
            {"id": "q7_1", "weight": 1, "gap_types": ["automação"],
             "text": "Altamente automatizado com ferramentas integradas"},
            {"id": "q7_2", "weight": 0.6, "gap_types": ["automação", "eficiência"],
             "text": "Algumas automações básicas"},
            {"id": "q7_3", "weight": 0.2, "gap_types": ["automação", "eficiência", "processo"],
             "text": "Processos majoritariamente manuais"},
        ],
    },
    {
        "id": "q8",
        "text": "Como você trabalha a previsibilidade de vendas?",
        "options": [
            {"id": "q8_1", "weight": 1, "gap_types": ["previsibilidade"],
             "text": "Forecast baseado em dados históricos e tendências"},
            {"id": "q8_2", "weight": 0.6, "gap_types": ["previsibilidade", "processo"],
             "text": "Estimativas básicas sem modelo definido"},
            {"id": "q8_3", "weight": 0.2, "gap_types": ["previsibilidade", "processo", "estratégia"],
             "text": "Não fazemos previsão de vendas"},
        ],
    },
]
