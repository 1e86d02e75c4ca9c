# finsafe/runtime/knowledge.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

DEBIT_CARD = """💳 **Debit Card Basics for Students**

A debit card is directly linked to your bank account. Money is deducted immediately when you use it.

✅ **Advantages:**
• Safer than carrying cash
• Helps control spending (can't spend more than you have)
• Use for online shopping, bill payments
• Track expenses via bank statements

🔒 **Security Tips:**
• Never share your PIN with anyone
• Enable SMS alerts for all transactions
• Use at trusted ATMs only
• Report lost cards immediately

📱 **For Students:** Start with a basic savings account with debit card. Most banks offer zero-balance accounts for students."""

EMI = """📋 **EMI (Equated Monthly Installment) Guide**

EMI is your fixed monthly loan payment that includes both principal and interest.

💡 **Smart EMI Rules for Students:**
• Keep total EMIs below 30% of your income
• Example: ₹25,000 monthly income → ₹7,500 max EMI
• Use online EMI calculators before committing
• Compare interest rates from different banks

📊 **Example Calculation:**
• Loan: ₹50,000 at 12% interest for 2 years
• EMI: ₹2,355 per month
• Total Interest: ₹6,520
• Total Payment: ₹56,520

⚠️ **Warning:** Avoid multiple EMIs simultaneously. Always read loan terms carefully."""

CREDIT_CARD = """💳 **Credit Cards: Student Edition**

Credit cards let you borrow money up to a credit limit. Interest rates: 18-42% annually in India.

✅ **When to Use:**
• Building credit history (important for future loans)
• Emergency expenses only
• Online purchases (better security than debit cards)
• Reward points on spending

❌ **Dangers for Students:**
• Easy to overspend beyond your means
• High interest if you don't pay full amount
• Minimum payment trap (paying just minimum keeps debt growing)
• Late payment fees and credit score damage

🛡️ **Safety Rules:**
1. Set a spending limit of 30% of your credit limit
2. ALWAYS pay full balance by due date
3. Never use for cash withdrawals (high charges)
4. Monitor transactions weekly via bank app
5. Report lost cards immediately

💡 **Student Tip:** Start with a secured credit card or low-limit card (₹10,000-20,000)."""

SCAMS = """⚠️ **Common Financial Scams Targeting Students**

1. **Fake Job/Internship Offers:**
   • "Pay ₹2,000 registration fee for work-from-home job"
   • "Processing fee for guaranteed placement"

2. **Scholarship Fraud:**
   • "Pay ₹500 to get ₹50,000 scholarship"
   • "Exclusive scholarship for limited students"

3. **Bank Phishing:**
   • "Your account is blocked. Click link to verify"
   • "Update KYC or account will be suspended"

4. **Investment Scams:**
   • "Double your money in 30 days"
   • "Guaranteed returns of 50% monthly"

🛡️ **Protection Guide:**
• Never share OTP/PIN/CVV with ANYONE
• Verify offers through official college/bank channels
• Check sender's number/email carefully
• Use UPI for payments (more secure)
• Report scams to cybercrime.gov.in

📞 **Emergency Contacts:**
• Cyber Crime Helpline: 1930
• National Cyber Crime Portal: cybercrime.gov.in"""

BUDGETING = """💰 **Simple Budgeting for Students (Monthly Guide)**

📊 **50-30-20 Rule:**
• **50% Needs:** Rent, food, transport, utilities
• **30% Wants:** Movies, eating out, shopping, hobbies
• **20% Savings:** Emergency fund, investments, goals

💡 **Practical Student Tips:**
1. **Track EVERY expense for 1 month** (use Notes app)
2. **Cook 5 days/week**, eat out 2 days (save ₹3,000-5,000/month)
3. **Use public transport** instead of cabs (save ₹2,000-4,000/month)
4. **Share subscriptions** (Netflix, Amazon Prime with friends)
5. **Buy second-hand textbooks** or use library
6. **Use student discounts** everywhere (theaters, museums, transport)

🎯 **Sample Student Budget (₹25,000/month):**
• Rent/Hostel: ₹8,000 (32%)
• Food: ₹6,000 (24%)
• Transport: ₹2,000 (8%)
• Study Material: ₹2,000 (8%)
• Entertainment: ₹3,000 (12%)
• **SAVINGS: ₹4,000 (16%)**

💰 **Start with saving just ₹500-1,000/month.** Consistency matters more than amount!"""

INVESTMENTS = """📈 **First Investments for Students**

**Beginner-Friendly Options (Start with ₹500/month):**

1. **Recurring Deposit (RD):**
   • Minimum: ₹500/month
   • Returns: 5-7% annually
   • Safe, guaranteed returns
   • Good for short-term goals (1-5 years)

2. **Mutual Fund SIP (Systematic Investment Plan):**
   • Minimum: ₹500/month
   • Returns: 10-15% long-term (market-linked)
   • Choose equity funds for long-term (5+ years)
   • Use apps like Groww, Zerodha, Kuvera

3. **Public Provident Fund (PPF):**
   • Minimum: ₹500/year
   • Returns: 7.1% currently (tax-free)
   • 15-year lock-in (good for long-term)
   • Tax benefits under Section 80C

4. **Digital Gold:**
   • Start with ₹100
   • Easy via apps like Paytm, Google Pay
   • Can convert to physical gold
   • Good for small, regular savings

⚠️ **Important Rules:**
• Start SMALL (₹500/month)
• NEVER invest in "get rich quick" schemes
• Understand what you're investing in
• Diversify (spread across 2-3 options)
• Be patient (investments need time to grow)

💡 **Student Strategy:** Start with RD + one SIP. Automate payments so you don't forget."""

EMERGENCY_FUND = """🆘 **Emergency Fund for Students**

**What is it?** Money set aside for unexpected expenses (medical, travel, repairs, etc.).

🎯 **Goal:** 3-6 months of basic expenses

**For Students:**
• Monthly expenses: ₹15,000
• Emergency fund target: ₹45,000-₹90,000

💰 **How to Build:**
1. **Start small:** Save ₹1,000/month
2. **Use separate account:** Don't mix with regular money
3. **Automate transfers:** Set auto-debit on salary day
4. **Windfall money:** Put part of gifts/bonuses into emergency fund

🏦 **Where to Keep:**
• **Savings account:** Easy access, low interest
• **Liquid mutual funds:** Better returns, easy withdrawal
• **Don't use:** Fixed deposits (penalty for early withdrawal)

⚠️ **When to Use:**
• Medical emergencies
• Family emergencies
• Urgent travel
• Essential repairs

❌ **When NOT to Use:**
• Shopping sales
• Weekend trips
• Gadget upgrades
• Non-essential purchases"""

_GENERIC_TEMPLATE = """🤔 I understand you're asking about: "{query}"

I'm FinSafe AI, your financial safety assistant for students and young earners in India. I can help you with:

💳 **Credit/Debit Cards** - Understanding risks and safe usage
📋 **EMI & Loans** - Smart borrowing strategies
⚠️ **Scam Prevention** - Protecting yourself from fraud
💰 **Saving & Budgeting** - Managing your money effectively
📈 **First Investments** - Starting your investment journey
🆘 **Emergency Funds** - Preparing for unexpected expenses

💡 **General advice for students:**
1. Start tracking your expenses today
2. Save at least 10-20% of any money you receive
3. Avoid debt unless absolutely necessary for education
4. Build an emergency fund before investing
5. Learn about scams - knowledge is your best protection

Ask me anything specific about your financial situation!"""


@dataclass(frozen=True)
class TopicRule:
    topic: str
    matches: Callable[[str], bool]
    response: str


def _all_of(*terms: str) -> Callable[[str], bool]:
    return lambda q: all(t in q for t in terms)


def _any_of(*terms: str) -> Callable[[str], bool]:
    return lambda q: any(t in q for t in terms)


def _default_rules() -> List[TopicRule]:
    # Order matters: first match wins.
    return [
        TopicRule("debit_card", _all_of("debit", "card"), DEBIT_CARD),
        TopicRule("emi", _any_of("emi", "loan"), EMI),
        TopicRule("credit_card", _any_of("credit card"), CREDIT_CARD),
        TopicRule("scam", _any_of("scam", "fraud"), SCAMS),
        TopicRule("budgeting", _any_of("save", "budget"), BUDGETING),
        TopicRule("investment", _any_of("investment", "invest"), INVESTMENTS),
        TopicRule("emergency_fund", _any_of("emergency fund"), EMERGENCY_FUND),
    ]


RULES: List[TopicRule] = _default_rules()


def match_topic(query: str, rules: List[TopicRule] | None = None) -> TopicRule | None:
    lowered = (query or "").lower()
    for rule in rules if rules is not None else RULES:
        if rule.matches(lowered):
            return rule
    return None


def get_enhanced_mock_response(query: str) -> str:
    """Canned answer for the first topic the query mentions, else the capability overview."""
    rule = match_topic(query)
    if rule is not None:
        return rule.response
    return _GENERIC_TEMPLATE.format(query=query)
