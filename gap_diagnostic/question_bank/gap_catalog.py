"""
Gap Diagnostic — Catálogo de GAPs

Descrição e recomendações por tipo de GAP. Tipos desconhecidos recebem
um texto genérico (nunca erro).
"""

from typing import Dict, Tuple

GAP_DESCRIPTIONS: Dict[str, str] = {
    "processo": "Falta de processos estruturados e padronizados no funil de vendas",
    "documentação": "Ausência de documentação clara dos processos e procedimentos",
    "estratégia": "Necessidade de direcionamento estratégico mais claro",
    "monitoramento": "Deficiência no acompanhamento e análise das métricas",
    "metas": "Ausência de metas claras e mensuráveis",
    "qualificação": "Problemas na identificação e classificação de leads",
    "nutrição": "Falhas no relacionamento e nutrição de leads",
    "personalização": "Falta de personalização no tratamento dos leads",
    "conversão": "Baixa taxa de conversão entre etapas do funil",
    "eficiência": "Oportunidades de melhoria na produtividade",
    "otimização": "Necessidade de otimização contínua do funil",
    "automação": "Processos manuais que poderiam ser automatizados",
    "previsibilidade": "Dificuldade em prever resultados de vendas",
}

GAP_RECOMMENDATIONS: Dict[str, Tuple[str, ...]] = {
    "processo": (
        "Mapear e documentar todo o processo de vendas",
        "Criar playbooks e scripts de vendas",
        "Estabelecer pontos de controle e validação",
        "Implementar metodologia de vendas",
    ),
    "documentação": (
        "Criar manual de processos de vendas",
        "Documentar melhores práticas",
        "Estabelecer padrões de documentação",
        "Manter biblioteca de casos de sucesso",
    ),
    "estratégia": (
        "Definir ICP (Perfil de Cliente Ideal)",
        "Estabelecer objetivos claros de vendas",
        "Alinhar vendas com objetivos do negócio",
        "Desenvolver plano estratégico de crescimento",
    ),
    "monitoramento": (
        "Implementar dashboard de KPIs",
        "Estabelecer rotina de análise de métricas",
        "Criar relatórios automatizados",
        "Definir indicadores por etapa do funil",
    ),
    "metas": (
        "Estabelecer metas SMART por etapa",
        "Criar sistema de acompanhamento",
        "Implementar gestão por OKRs",
        "Definir KPIs individuais e em equipe",
    ),
    "qualificação": (
        "Implementar sistema de lead scoring",
        "Criar matriz de qualificação",
        "Estabelecer critérios de MQL e SQL",
        "Treinar equipe em qualificação",
    ),
    "nutrição": (
        "Criar jornadas de nutrição personalizadas",
        "Implementar automação de marketing",
        "Desenvolver conteúdo relevante",
        "Estabelecer pontos de contato estratégicos",
    ),
    "personalização": (
        "Segmentar base de leads",
        "Criar personas detalhadas",
        "Personalizar comunicação por perfil",
        "Implementar triggers comportamentais",
    ),
    "conversão": (
        "Analisar pontos de atrito no funil",
        "Otimizar material de vendas",
        "Testar diferentes abordagens",
        "Implementar testes A/B",
    ),
    "eficiência": (
        "Identificar e eliminar gargalos",
        "Automatizar tarefas repetitivas",
        "Otimizar processos internos",
        "Implementar ferramentas de produtividade",
    ),
    "otimização": (
        "Estabelecer processo de melhoria contínua",
        "Realizar análises periódicas",
        "Coletar feedback da equipe",
        "Implementar ciclos de otimização",
    ),
    "automação": (
        "Mapear processos automatizáveis",
        "Implementar CRM robusto",
        "Integrar ferramentas de vendas",
        "Automatizar follow-ups",
    ),
    "previsibilidade": (
        "Implementar modelo de forecast",
        "Criar pipeline de oportunidades",
        "Estabelecer métricas preditivas",
        "Desenvolver análise de tendências",
    ),
}

DEFAULT_DESCRIPTION = "Gap identificado no processo"
DEFAULT_RECOMMENDATIONS: Tuple[str, ...] = (
    "Avaliar processo atual",
    "Identificar pontos de melhoria",
)


def get_gap_description(gap_type: str) -> str:
    return GAP_DESCRIPTIONS.get(gap_type, DEFAULT_DESCRIPTION)


def get_gap_recommendations(gap_type: str) -> Tuple[str, ...]:
    return GAP_RECOMMENDATIONS.get(gap_type, DEFAULT_RECOMMENDATIONS)


def is_known_gap_type(gap_type: str) -> bool:
    return gap_type in GAP_DESCRIPTIONS
