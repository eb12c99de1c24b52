"""Text pre-filled in the input box on first load."""

SAMPLE_TEXT = """\
🔋 CURTAILMENT: O Guia Completo para Entender o Excedente Energético Global

## 📋 Índice
1. [O que é Curtailment para "Idiotas"](#o-que-é-curtailment-para-idiotas)
2. [Glossário Essencial](#glossário-essencial)
3. [Os Três Tipos de Curtailment](#os-três-tipos-de-curtailment)
4. [Excedente Global 2025-2030](#excedente-global-2025-2030)
5. [Interligação Global](#interligação-global)
6. [Perguntas Críticas](#perguntas-críticas)
7. [Soluções e Oportunidades](#soluções-e-oportunidades)

---

## 🤔 O que é Curtailment para "Idiotas"

Imagine que você tem uma **torneira que não para de pingar** (energia renovável) mas seu **balde já está cheio** (demanda atendida). O **curtailment** é quando você tem que:

- 🚰 **"Fechar a torneira"** temporariamente
- 💸 **Jogar água fora** porque não tem onde armazenar
- 🔌 **Desconectar** a fonte para não sobrecarregar o sistema

### Analogia da Padaria
É como uma padaria que faz 1000 pães por dia, mas só vende 600:
- **400 pães "sobram"** (excesso de produção)
- **Não pode guardar** todos (falta armazenamento)
- **Tem que descartar** (curtailment)
- **Perde dinheiro** no processo

---

## 📚 Glossário Essencial

| Termo | Significado Simples | Significado Técnico |
|-------|-------------------|-------------------|
| **Curtailment** | "Desligar" energia renovável | Redução forçada da geração renovável |
| **TWh** | Terawatt-hora | 1 trilhão de watts por hora |
| **GW** | Gigawatt | 1 bilhão de watts |
| **Merit Order** | "Fila de prioridade" | Ordem de despacho por custo |
| **TSO** | "Controlador da rede" | Transmission System Operator |
| **BESS** | "Bateria gigante" | Battery Energy Storage System |
| **V2G** | "Carro vira bateria" | Vehicle-to-Grid |
| **MMGD** | "Energia caseira" | Micro e Minigeração Distribuída |
| **aFRR** | "Ajuste automático" | automatic Frequency Restoration Reserve |
| **Preços Negativos** | "Te pagam para consumir" | Preços abaixo de zero no mercado |

---

## ⚡ Os Três Tipos de Curtailment

### 1️⃣ **Curtailment Econômico** 💰
**O que é:** Sobrou energia, preços ficaram negativos
**Exemplo Real:** Holanda pagou -7,45€/MWh (te pagavam para usar energia)
**Quem ganha:** Quem consome energia
**Quem perde:** Quem produz energia

### 2️⃣ **Curtailment Técnico** ⚡
**O que é:** A rede não aguenta, precisa desligar para não quebrar
**Exemplo:** Cabo de energia "entupido", precisa reduzir fluxo
**Decisão:** Operador do sistema (ONS no Brasil)
**Prioridade:** Segurança da rede

### 3️⃣ **Curtailment Flexível** 🔄
**O que é:** Usa o "corte" como serviço para equilibrar a rede
**Inovação:** Transforma problema em oportunidade de lucro
**Mercado:** Serviços ancilares, balanceamento
**Resultado:** Ganha dinheiro cortando energia

---

## 🌍 Excedente Global 2025-2030: Os Números Brutais

### **Crescimento Explosivo da Capacidade**
- **2025:** Renováveis representarão 35% da geração global
- **2030:** Capacidade renovável vai **triplicar** (11 TW globalmente)
- **Realidade:** Crescimento de 5.500 GW entre 2024-2030

### **Demanda vs. Oferta: O Descompasso**

| Ano | Demanda Global | Capacidade Renovável | **Excedente Potencial** |
|-----|---------------|---------------------|------------------------|
| **2025** | ~31.000 TWh | ~40.000 TWh | **9.000 TWh** (29%) |
| **2030** | ~38.000 TWh | ~65.000 TWh | **27.000 TWh** (71%) |
---
"""
